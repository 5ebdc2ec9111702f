"""
Nullability and container wrapping for TypeScript output.

Composition order, innermost first:
named type -> FieldWrapper -> Maybe/InputMaybe -> Array -> ... -> EntireFieldWrapper
"""

from dataclasses import dataclass
from typing import Callable, Optional

from graphql import (
    GraphQLInputType,
    GraphQLNamedType,
    GraphQLOutputType,
    get_named_type,
    is_list_type,
    is_non_null_type,
)

from .config import TypeScriptConfig

MAYBE = "Maybe"
INPUT_MAYBE = "InputMaybe"
FIELD_WRAPPER = "FieldWrapper"
ENTIRE_FIELD_WRAPPER = "EntireFieldWrapper"


@dataclass(frozen=True)
class WrapperSpec:
    """Wrapping decision for one field or argument."""

    type: str
    optional: bool = False
    readonly: bool = False

    def attribute(self, name: str) -> str:
        """Render as a `name?: Type;` member."""
        readonly = "readonly " if self.readonly else ""
        sign = "?" if self.optional else ""
        return f"{readonly}{name}{sign}: {self.type};"


class TypeWrapper:
    """Builds wrapped type expressions for output and input positions."""

    def __init__(
        self,
        config: TypeScriptConfig,
        resolve_named: Callable[[GraphQLNamedType, bool], str],
    ):
        """
        Args:
            config: Generator configuration
            resolve_named: Callback giving the expression of a named type,
                called with (type, is_input)
        """
        self.config = config
        self.resolve_named = resolve_named
        self.array = "ReadonlyArray" if config.immutable_types else "Array"

    def output(self, field_type: GraphQLOutputType) -> WrapperSpec:
        wrapped = self._wrap(field_type, is_input=False)
        if self.config.wrap_entire_field_definitions:
            wrapped = f"{ENTIRE_FIELD_WRAPPER}<{wrapped}>"
        return WrapperSpec(
            type=wrapped,
            optional=not is_non_null_type(field_type) and not self.config.avoid.field,
            readonly=self.config.immutable_types,
        )

    def input(
        self,
        input_type: GraphQLInputType,
        has_default: bool = False,
        override: Optional[str] = None,
    ) -> WrapperSpec:
        """
        Wrap an input field or argument.

        Args:
            input_type: Declared type
            has_default: Whether a default value is declared
            override: Expression replacing the whole wrapped type
        """
        avoid = self.config.avoid
        if has_default and not avoid.default_value:
            optional = True
        else:
            optional = not is_non_null_type(input_type) and not avoid.input_value
        return WrapperSpec(
            type=override or self._wrap(input_type, is_input=True),
            optional=optional,
            readonly=self.config.immutable_types,
        )

    def _wrap(self, graphql_type, is_input: bool) -> str:
        if is_non_null_type(graphql_type):
            return self._wrap_inner(graphql_type.of_type, is_input)
        maybe = INPUT_MAYBE if is_input else MAYBE
        return f"{maybe}<{self._wrap_inner(graphql_type, is_input)}>"

    def _wrap_inner(self, graphql_type, is_input: bool) -> str:
        if is_list_type(graphql_type):
            return f"{self.array}<{self._wrap(graphql_type.of_type, is_input)}>"
        named = self.resolve_named(get_named_type(graphql_type), is_input)
        if not is_input and self.config.wrap_field_definitions:
            named = f"{FIELD_WRAPPER}<{named}>"
        return named

    def required_input(self, input_type: GraphQLInputType) -> str:
        """Input expression with the outermost nullable level dropped."""
        if is_non_null_type(input_type):
            input_type = input_type.of_type
        return self._wrap_inner(input_type, is_input=True)
