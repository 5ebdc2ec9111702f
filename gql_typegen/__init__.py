"""
gql_typegen: TypeScript type declarations from GraphQL schemas.
"""

from .codegen.core.config import ConfigError
from .codegen.core.generator import (
    GeneratorError,
    OneOfInputError,
    PluginOutput,
    UnknownScalarError,
)
from .codegen.languages.typescript import TypeScriptConfig, TypeScriptGenerator, plugin

__version__ = "0.1.0"

__all__ = [
    "plugin",
    "PluginOutput",
    "TypeScriptConfig",
    "TypeScriptGenerator",
    "ConfigError",
    "GeneratorError",
    "UnknownScalarError",
    "OneOfInputError",
    "__version__",
]
