"""
Enum resolution for TypeScript output.

Decides member keys and values, external enum imports and how enum
types are referenced at usage sites.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Set, Union

from graphql import GraphQLEnumType

from ....logging_config import get_logger
from ...core.imports import ImportAggregator, ParsedMapper, is_external_mapper, parse_mapper
from ...core.schema import get_deprecation_reason, schema_enum_value
from .config import TypeScriptConfig
from .naming import NameTable

logger = get_logger(__name__)

FUTURE_ADDED_VALUE = "'%future added value'"


@dataclass(frozen=True)
class EnumMember:
    """One resolved enum value."""

    name: str  # Raw schema value name
    key: str  # Legalized member key
    value: Union[str, int, float]
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None

    @property
    def literal(self) -> str:
        return format_literal(self.value)


def format_literal(value: Any) -> str:
    """Render a value as a TypeScript literal: numbers bare, strings quoted."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _unique_key(value_name: str, used_keys: Set[str]) -> str:
    """Quoted raw value name, numbered when that is taken as well."""
    candidate = value_name
    counter = 2
    while candidate in used_keys:
        candidate = f"{value_name}_{counter}"
        counter += 1
    return f"'{candidate}'"


class EnumResolver:
    """Resolves enum values and references for one generation run."""

    def __init__(self, config: TypeScriptConfig, names: NameTable):
        self.config = config
        self.names = names

    def external_mapper(self, enum_name: str) -> Optional[ParsedMapper]:
        """Import descriptor when the enum lives in another module."""
        enum_values = self.config.enum_values
        if isinstance(enum_values, str):
            return parse_mapper(f"{enum_values}#{enum_name}", enum_name)
        value = enum_values.get(enum_name)
        if value is not None and is_external_mapper(value):
            return parse_mapper(value, enum_name)
        return None

    def is_external(self, enum_name: str) -> bool:
        return self.external_mapper(enum_name) is not None

    def register_external(self, enum_type: GraphQLEnumType, imports: ImportAggregator):
        """
        Import an external enum and pass it through.

        The enum is bound under its raw schema name; other symbols and
        namespace members get an alias assignment.
        """
        mapper = self.external_mapper(enum_type.name)
        if mapper is None:
            return
        imports.add(mapper.module, mapper.local, mapper.imported, type_only=False)
        if mapper.local != enum_type.name:
            imports.add_assignment(enum_type.name, mapper.type)
        if not self.config.no_export:
            imports.add_reexport(enum_type.name)
        logger.debug("Enum %s imported from %s", enum_type.name, mapper.module)

    def declared_name(self, enum_type: GraphQLEnumType) -> str:
        """Identifier used for the enum in declarations and references."""
        if self.is_external(enum_type.name):
            return enum_type.name
        return self.names.enum_name(enum_type.name)

    def reference(self, enum_type: GraphQLEnumType) -> str:
        """Type expression for the enum at a usage site."""
        name = self.declared_name(enum_type)
        if self.config.enums_as_types:
            return name
        parts = [name]
        if self.config.future_proof_enums:
            parts.append(FUTURE_ADDED_VALUE)
        if self.config.allow_enum_string_types:
            parts.append(f"`${{{name}}}`")
        return " | ".join(parts)

    def _value_overrides(self, enum_name: str) -> dict:
        enum_values = self.config.enum_values
        if isinstance(enum_values, dict):
            overrides = enum_values.get(enum_name)
            if isinstance(overrides, dict) and not is_external_mapper(overrides):
                return overrides
        return {}

    def members(self, enum_type: GraphQLEnumType) -> List[EnumMember]:
        """
        Resolve every value of an enum in declaration order.

        Configured overrides win, then values set on the schema itself,
        then ascending integers under numeric_enums, then the value name.
        A value whose key is already taken is keyed by its quoted raw name.
        """
        overrides = self._value_overrides(enum_type.name)
        members = []
        used_keys = set()
        for index, (value_name, enum_value) in enumerate(enum_type.values.items()):
            if value_name in overrides:
                value = overrides[value_name]
            else:
                value = schema_enum_value(value_name, enum_value.value)
                if value is None:
                    value = index if self.config.numeric_enums else value_name
            key = self.names.enum_key(enum_type.name, value_name)
            if key.strip("'") in used_keys:
                key = _unique_key(value_name, used_keys)
                logger.debug("Enum %s: value %s keyed as %s", enum_type.name, value_name, key)
            used_keys.add(key.strip("'"))
            members.append(
                EnumMember(
                    name=value_name,
                    key=key,
                    value=value,
                    description=enum_value.description,
                    deprecation_reason=get_deprecation_reason(enum_value),
                )
            )
        return members

    def find_key_collisions(self, enum_type: GraphQLEnumType) -> List[str]:
        """Legalized keys produced by more than one enum value."""
        seen = set()
        collisions = []
        for value_name in enum_type.values:
            key = self.names.enum_key(enum_type.name, value_name)
            if key in seen and key not in collisions:
                collisions.append(key)
            seen.add(key)
        return collisions
