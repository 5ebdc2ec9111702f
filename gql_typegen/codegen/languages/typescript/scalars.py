"""
Scalar resolution for TypeScript output.

Maps built-in and custom scalars to type expressions or imported symbols.
"""

from typing import Dict, List, Optional, Tuple

from graphql import GraphQLScalarType, GraphQLSchema

from ....logging_config import get_logger
from ...core.generator import UnknownScalarError
from ...core.imports import ImportAggregator, ParsedMapper, parse_mapper
from ...core.schema import is_builtin_scalar, iter_named_types
from .config import TypeScriptConfig
from .naming import SCALARS_TYPE_NAME

logger = get_logger(__name__)

# Built-in scalar representations
DEFAULT_SCALARS: Dict[str, str] = {
    "ID": "string",
    "String": "string",
    "Boolean": "boolean",
    "Int": "number",
    "Float": "number",
}


class ScalarMap:
    """Scalar name -> ParsedMapper for one generation run."""

    def __init__(self, schema: GraphQLSchema, config: TypeScriptConfig):
        self.config = config
        self.mappers: Dict[str, ParsedMapper] = {
            name: ParsedMapper(type=ts_type) for name, ts_type in DEFAULT_SCALARS.items()
        }
        self.descriptions: Dict[str, Optional[str]] = {}

        schema_scalars = [
            named_type
            for named_type in iter_named_types(schema)
            if isinstance(named_type, GraphQLScalarType)
        ]

        if config.strict_scalars:
            self._check_strict(schema_scalars)

        for scalar in schema_scalars:
            self.mappers[scalar.name] = self._resolve(scalar)
            if not is_builtin_scalar(scalar):
                self.descriptions[scalar.name] = scalar.description

        # Mapped scalars the schema does not declare are still exposed
        if isinstance(config.scalars, dict):
            declared = {scalar.name for scalar in schema_scalars}
            for name, value in config.scalars.items():
                if name not in declared:
                    self.mappers[name] = parse_mapper(value, name)

    def _check_strict(self, schema_scalars: List[GraphQLScalarType]):
        if isinstance(self.config.scalars, str):
            return
        for scalar in schema_scalars:
            if is_builtin_scalar(scalar) or scalar.name in self.config.scalars:
                continue
            raise UnknownScalarError(scalar.name)

    def _resolve(self, scalar: GraphQLScalarType) -> ParsedMapper:
        scalars = self.config.scalars
        if isinstance(scalars, str):
            if scalar.name in DEFAULT_SCALARS:
                return ParsedMapper(type=DEFAULT_SCALARS[scalar.name])
            return parse_mapper(f"{scalars}#{scalar.name}", scalar.name)
        if scalar.name in scalars:
            mapper = parse_mapper(scalars[scalar.name], scalar.name)
            logger.debug("Scalar %s mapped to %s", scalar.name, mapper.type)
            return mapper
        if scalar.name in DEFAULT_SCALARS:
            return ParsedMapper(type=DEFAULT_SCALARS[scalar.name])
        return ParsedMapper(type=self.config.default_scalar_type)

    def register_imports(self, imports: ImportAggregator):
        for mapper in self.mappers.values():
            imports.add_mapper(mapper)

    def members(self) -> List[Tuple[str, str, Optional[str]]]:
        """(name, type expression, description) rows in declaration order."""
        return [
            (name, mapper.type, self.descriptions.get(name))
            for name, mapper in self.mappers.items()
        ]

    @staticmethod
    def reference(name: str) -> str:
        """Type expression referring to a scalar entry."""
        return f"{SCALARS_TYPE_NAME}['{name}']"
