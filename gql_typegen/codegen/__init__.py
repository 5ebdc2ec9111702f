"""
GraphQL Code Generation Module

Generates type declarations from GraphQL schemas.
"""

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, PluginOutput, generate_code
from .core.schema import load_schema
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)


# Convenience functions
def generate_from_schema(schema, language="typescript", config=None):
    """
    Generate code for a schema object or SDL text.

    Args:
        schema: GraphQLSchema or SDL source
        language: Target language name
        config: Generator configuration dict or path

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, load_schema(schema))


def quick_generate(sdl, language="typescript", **options):
    """
    Quick code generation from SDL text.

    Args:
        sdl: Schema definition language source
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    result = generate_from_schema(sdl, language, options)

    if result.success:
        return result.code
    raise RuntimeError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "PluginOutput",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "generate_code",
    "generate_from_schema",
    "quick_generate",
    "get_generator",
    "get_registry",
    "list_supported_languages",
]
