"""
Schema access helpers for code generation.

Thin layer over graphql-core: building schemas from SDL, walking named
types in declaration order and reading directives off AST nodes.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional, Union

from graphql import (
    DirectiveNode,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    Undefined,
    build_schema,
    is_introspection_type,
    is_specified_scalar_type,
)

ONE_OF_DIRECTIVE = "oneOf"


def load_schema(schema: Union[GraphQLSchema, str]) -> GraphQLSchema:
    """
    Return a GraphQLSchema, building it from SDL text when needed.

    Args:
        schema: Schema object or SDL source

    Returns:
        GraphQLSchema instance
    """
    if isinstance(schema, GraphQLSchema):
        return schema
    return build_schema(schema)


def iter_named_types(schema: GraphQLSchema) -> Iterator[GraphQLNamedType]:
    """Yield user-facing named types in schema declaration order."""
    for named_type in schema.type_map.values():
        if is_introspection_type(named_type) or named_type.name.startswith("__"):
            continue
        yield named_type


def is_builtin_scalar(named_type: GraphQLNamedType) -> bool:
    return is_specified_scalar_type(named_type)


def get_directive_nodes(definition: Any) -> List[DirectiveNode]:
    """
    Collect directive usages from a definition and its extensions.

    Works for named types (ast_node plus extension_ast_nodes), fields,
    arguments and input fields (ast_node only).
    """
    nodes = []
    ast_node = getattr(definition, "ast_node", None)
    if ast_node is not None and ast_node.directives:
        nodes.extend(ast_node.directives)
    for extension in getattr(definition, "extension_ast_nodes", None) or ():
        if extension.directives:
            nodes.extend(extension.directives)
    return nodes


def get_directive_names(definition: Any) -> List[str]:
    """Directive names applied to a definition, in declaration order."""
    return [node.name.value for node in get_directive_nodes(definition)]


def is_one_of_input(named_type: GraphQLNamedType) -> bool:
    """Check whether an input object is marked with @oneOf."""
    if getattr(named_type, "is_one_of", False):
        return True
    return ONE_OF_DIRECTIVE in get_directive_names(named_type)


def get_implementing_objects(
    schema: GraphQLSchema, interface: GraphQLInterfaceType
) -> List[GraphQLObjectType]:
    """
    Collect concrete object types implementing an interface.

    Objects implementing a sub-interface count as implementers of the
    parent. Results are deduplicated in discovery order.
    """
    found: List[GraphQLObjectType] = []
    seen_interfaces = set()

    def collect(current: GraphQLInterfaceType):
        if current.name in seen_interfaces:
            return
        seen_interfaces.add(current.name)
        implementations = schema.get_implementations(current)
        for obj in implementations.objects:
            if obj not in found:
                found.append(obj)
        for sub_interface in implementations.interfaces:
            collect(sub_interface)

    collect(interface)
    return found


def get_possible_types(
    schema: GraphQLSchema, abstract_type: Union[GraphQLInterfaceType, GraphQLUnionType]
) -> List[GraphQLObjectType]:
    """Concrete types an abstract type can resolve to."""
    if isinstance(abstract_type, GraphQLUnionType):
        return list(abstract_type.types)
    return get_implementing_objects(schema, abstract_type)


def has_default_value(definition: Any) -> bool:
    """
    Check whether an argument or input field declares a default value.

    Newer graphql-core releases keep SDL defaults in `default` and leave
    `default_value` undefined.
    """
    if getattr(definition, "default_value", Undefined) is not Undefined:
        return True
    return getattr(definition, "default", None) is not None


def get_deprecation_reason(definition: Any) -> Optional[str]:
    return getattr(definition, "deprecation_reason", None)


def schema_enum_value(name: str, value: Any) -> Optional[Union[str, int, float]]:
    """
    Return a value set on an enum definition when it differs from its name.

    SDL-built enums store the value name itself, which counts as unset.
    """
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, bool) or value == name:
        return None
    if isinstance(value, (str, int, float)):
        return value
    return None
