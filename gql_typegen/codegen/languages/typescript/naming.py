"""
TypeScript-specific naming.

Resolves schema names to output identifiers: type names with prefix and
suffix, enum names, enum member keys and argument bag names.
"""

from typing import Dict, Tuple

from ...core.naming import NameSanitizer, NamingCase, is_identifier
from .config import TypeScriptConfig

SCALARS_TYPE_NAME = "Scalars"
DIRECTIVE_MAPPINGS_TYPE_NAME = "DirectiveArgumentAndInputFieldMappings"


class NameTable:
    """Memoized schema name -> identifier mapping for one generation run."""

    def __init__(self, config: TypeScriptConfig):
        self.config = config
        self.naming = config.naming
        self.sanitizer = NameSanitizer(self.naming.type_names)
        self._type_names: Dict[str, str] = {}
        self._enum_names: Dict[str, str] = {}
        self._enum_keys: Dict[Tuple[str, str], str] = {}
        self._args_names: Dict[Tuple[str, str], str] = {}

    def convert(
        self,
        name: str,
        use_prefix: bool = True,
        use_suffix: bool = True,
        case: NamingCase = None,
        transform_underscore: bool = None,
    ) -> str:
        """Convert a raw name with the configured case, prefix and suffix."""
        if transform_underscore is None:
            transform_underscore = self.naming.transform_underscore
        converted = self.sanitizer.sanitize_name(
            name, case or self.naming.type_names, transform_underscore
        )
        prefix = self.config.types_prefix if use_prefix else ""
        suffix = self.config.types_suffix if use_suffix else ""
        return f"{prefix}{converted}{suffix}"

    def type_name(self, name: str) -> str:
        """Identifier of an object, interface, union or input type."""
        if name not in self._type_names:
            self._type_names[name] = self.convert(name)
        return self._type_names[name]

    def enum_name(self, name: str) -> str:
        """Identifier of a locally declared enum."""
        if name not in self._enum_names:
            self._enum_names[name] = self.convert(
                name, use_prefix=self.config.enum_prefix
            )
        return self._enum_names[name]

    def enum_key(self, enum_name: str, value_name: str) -> str:
        """
        Member key of an enum value.

        Underscores are always word boundaries here; keys that are not
        legal identifiers come back quoted.
        """
        key = (enum_name, value_name)
        if key not in self._enum_keys:
            identifier = self.convert(
                value_name,
                use_prefix=False,
                use_suffix=False,
                case=self.naming.enum_values,
                transform_underscore=True,
            )
            if not is_identifier(identifier):
                identifier = f"'{identifier}'"
            self._enum_keys[key] = identifier
        return self._enum_keys[key]

    def args_name(self, owner_name: str, field_name: str) -> str:
        """Identifier of the argument bag for owner_name.field_name."""
        key = (owner_name, field_name)
        if key not in self._args_names:
            separator = "_" if self.config.add_underscore_to_args_type else ""
            field_part = self.convert(field_name, use_prefix=False, use_suffix=False)
            self._args_names[key] = self.convert(
                f"{owner_name}{separator}{field_part}Args"
            )
        return self._args_names[key]
