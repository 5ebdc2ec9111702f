"""
TypeScript-specific configuration and validation.

Extends the base configuration system with every option the TypeScript
generator understands, plus parsed views of the compound options.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, Mapping, Union

from ...core.config import ConfigError, GeneratorConfig
from ...core.naming import NamingCase, resolve_naming_case, to_snake_case

DECLARATION_KINDS = ("type", "interface", "class")


def _record(value: Mapping[str, Any], option: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{option} must be a string, boolean or mapping")
    return {to_snake_case(str(key)): item for key, item in value.items()}


@dataclass(frozen=True)
class AvoidOptionals:
    """Which positions keep required attributes instead of `?`."""

    field: bool = False
    input_value: bool = False
    default_value: bool = False

    @classmethod
    def from_value(cls, value: Union[bool, Mapping[str, bool], None]) -> "AvoidOptionals":
        if value is None or value is False:
            return cls()
        if value is True:
            # Default-valued fields stay optional even in the blanket form
            return cls(field=True, input_value=True, default_value=False)
        record = _record(value, "avoid_optionals")
        return cls(
            field=bool(record.get("field", False)),
            input_value=bool(record.get("input_value", False)),
            default_value=bool(record.get("default_value", False)),
        )


@dataclass(frozen=True)
class DeclarationKinds:
    """Declaration keyword per construct category."""

    type: str = "type"
    input: str = "type"
    interface: str = "type"
    arguments: str = "type"

    @classmethod
    def from_value(cls, value: Union[str, Mapping[str, str], None]) -> "DeclarationKinds":
        if value is None:
            return cls()
        if isinstance(value, str):
            kinds = dict.fromkeys(("type", "input", "interface", "arguments"), value)
        else:
            kinds = _record(value, "declaration_kind")
        for category, kind in kinds.items():
            if kind not in DECLARATION_KINDS:
                raise ConfigError(
                    f"Invalid declaration_kind for {category}: {kind} "
                    f"(expected one of {', '.join(DECLARATION_KINDS)})"
                )
        known = {k: v for k, v in kinds.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class NamingConvention:
    """Case styles for type names and enum value identifiers."""

    type_names: NamingCase = NamingCase.PASCAL_CASE
    enum_values: NamingCase = NamingCase.PASCAL_CASE
    transform_underscore: bool = False

    @classmethod
    def from_value(cls, value: Union[str, Mapping[str, Any], None]) -> "NamingConvention":
        try:
            if value is None:
                return cls()
            if isinstance(value, (str, NamingCase)):
                case = resolve_naming_case(value)
                return cls(type_names=case, enum_values=case)
            record = _record(value, "naming_convention")
            return cls(
                type_names=resolve_naming_case(record.get("type_names")),
                enum_values=resolve_naming_case(record.get("enum_values")),
                transform_underscore=bool(record.get("transform_underscore", False)),
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e


@dataclass(frozen=True)
class TypeScriptConfig(GeneratorConfig):
    """TypeScript-specific configuration."""

    # Naming
    naming_convention: Union[str, Dict[str, Any]] = "pascalCase"
    types_prefix: str = ""
    types_suffix: str = ""
    enum_prefix: bool = True
    add_underscore_to_args_type: bool = False

    # Scalars
    scalars: Union[str, Dict[str, Any]] = field(default_factory=dict)
    default_scalar_type: str = "any"
    strict_scalars: bool = False

    # Enums
    enum_values: Union[str, Dict[str, Any]] = field(default_factory=dict)
    enums_as_const: bool = False
    enums_as_types: bool = False
    numeric_enums: bool = False
    const_enums: bool = False
    future_proof_enums: bool = False
    allow_enum_string_types: bool = False

    # Unions and abstract types
    future_proof_unions: bool = False
    use_implementing_types: bool = False

    # Declarations
    declaration_kind: Union[str, Dict[str, str]] = "type"
    immutable_types: bool = False
    skip_typename: bool = False
    non_optional_typename: bool = False
    no_export: bool = False
    disable_descriptions: bool = False
    use_type_imports: bool = False

    # Nullability and wrappers
    avoid_optionals: Union[bool, Dict[str, bool]] = False
    maybe_value: str = "T | null"
    input_maybe_value: str = "Maybe<T>"
    wrap_field_definitions: bool = False
    field_wrapper_value: str = "T"
    wrap_entire_field_definitions: bool = False
    entire_field_wrapper_value: str = "T"

    # Directive overrides
    directive_argument_and_input_field_mappings: Dict[str, Any] = field(
        default_factory=dict
    )
    directive_argument_and_input_field_mapping_type_suffix: str = ""

    def __post_init__(self):
        enum_modes = [
            name
            for name in ("enums_as_types", "enums_as_const", "numeric_enums", "const_enums")
            if getattr(self, name)
        ]
        if len(enum_modes) > 1:
            raise ConfigError(
                f"Options {', '.join(enum_modes)} are mutually exclusive"
            )
        if not isinstance(self.scalars, (str, Mapping)):
            raise ConfigError("scalars must be a module path or a mapping")
        if not isinstance(self.enum_values, (str, Mapping)):
            raise ConfigError("enum_values must be a module path or a mapping")
        if not isinstance(self.directive_argument_and_input_field_mappings, Mapping):
            raise ConfigError(
                "directive_argument_and_input_field_mappings must be a mapping"
            )

        # Parse compound options eagerly so bad values fail at load time
        self.naming
        self.declaration_kinds
        self.avoid

    @cached_property
    def naming(self) -> NamingConvention:
        return NamingConvention.from_value(self.naming_convention)

    @cached_property
    def declaration_kinds(self) -> DeclarationKinds:
        return DeclarationKinds.from_value(self.declaration_kind)

    @cached_property
    def avoid(self) -> AvoidOptionals:
        return AvoidOptionals.from_value(self.avoid_optionals)

    @property
    def export_prefix(self) -> str:
        return "" if self.no_export else "export "
