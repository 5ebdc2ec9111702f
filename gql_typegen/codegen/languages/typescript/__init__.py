"""
TypeScript code generator module.

Generates TypeScript type declarations from a GraphQL schema.
"""

from .config import AvoidOptionals, DeclarationKinds, NamingConvention, TypeScriptConfig
from .declarations import ConstructKind, Declaration, DeclarationRenderer
from .enums import EnumMember, EnumResolver
from .generator import TypeScriptEmitter, TypeScriptGenerator, plugin
from .naming import NameTable
from .scalars import DEFAULT_SCALARS, ScalarMap
from .types import TypeWrapper, WrapperSpec

__all__ = [
    # Generator
    "TypeScriptGenerator",
    "TypeScriptEmitter",
    "plugin",
    # Configuration
    "TypeScriptConfig",
    "AvoidOptionals",
    "DeclarationKinds",
    "NamingConvention",
    # Building blocks
    "NameTable",
    "ScalarMap",
    "DEFAULT_SCALARS",
    "EnumResolver",
    "EnumMember",
    "TypeWrapper",
    "WrapperSpec",
    "ConstructKind",
    "Declaration",
    "DeclarationRenderer",
    # Factory functions
    "create_generator",
    "create_strict_generator",
    "create_immutable_generator",
]


def create_generator(**options) -> TypeScriptGenerator:
    """
    Create a TypeScript generator from keyword options.

    Args:
        **options: Any TypeScriptConfig option (snake_case or camelCase)

    Returns:
        Configured TypeScriptGenerator instance
    """
    return TypeScriptGenerator(options)


def create_strict_generator(scalars=None, **options) -> TypeScriptGenerator:
    """
    Create generator that refuses to guess.

    Features:
    - Unmapped custom scalars fail the run
    - Output fields are required attributes typed with Maybe
    - Enums render as string literal unions
    """
    return TypeScriptGenerator(
        {
            "scalars": scalars or {},
            "strict_scalars": True,
            "avoid_optionals": {"field": True},
            "enums_as_types": True,
            **options,
        }
    )


def create_immutable_generator(**options) -> TypeScriptGenerator:
    """
    Create generator for read-only client models.

    Features:
    - readonly attributes and ReadonlyArray lists
    - Non-optional __typename discriminants
    - Future-proof enums and unions
    """
    return TypeScriptGenerator(
        {
            "immutable_types": True,
            "non_optional_typename": True,
            "future_proof_enums": True,
            "future_proof_unions": True,
            **options,
        }
    )


# Example usage patterns:
#
# Basic generator:
# generator = create_generator(typesPrefix="I", enumsAsTypes=True)
#
# One-shot:
# output = plugin(schema, [], {"scalars": {"DateTime": "string"}})
# print(output.merged())
