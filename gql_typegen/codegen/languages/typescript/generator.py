"""
TypeScript code generator implementation.

Walks a GraphQL schema in declaration order and emits TypeScript type
declarations plus the prelude they depend on.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    is_non_null_type,
)

from ....logging_config import get_logger
from ...core.generator import CodeGenerator, GeneratorError, OneOfInputError, PluginOutput
from ...core.imports import ImportAggregator, parse_mapper
from ...core.schema import (
    get_deprecation_reason,
    get_directive_names,
    get_possible_types,
    has_default_value,
    is_one_of_input,
    iter_named_types,
    load_schema,
)
from ...core.templates import TemplateEngine
from .config import TypeScriptConfig
from .declarations import (
    ConstructKind,
    Declaration,
    DeclarationRenderer,
    build_comment,
    create_typescript_template_engine,
    with_comment,
)
from .enums import FUTURE_ADDED_VALUE, EnumMember, EnumResolver
from .naming import DIRECTIVE_MAPPINGS_TYPE_NAME, SCALARS_TYPE_NAME, NameTable
from .scalars import ScalarMap
from .types import TypeWrapper

logger = get_logger(__name__)

SCALARS_COMMENT = "All built-in and custom scalars, mapped to their actual values"
DIRECTIVE_MAPPINGS_COMMENT = "Type overrides using directives"


class TypeScriptEmitter:
    """
    Per-run emission state.

    Owns the name table, scalar map, enum resolver and import aggregator
    for a single schema; a new emitter is built for every run.
    """

    def __init__(self, schema: GraphQLSchema, config: TypeScriptConfig, renderer: DeclarationRenderer):
        self.schema = schema
        self.config = config
        self.renderer = renderer
        self.names = NameTable(config)
        self.imports = ImportAggregator(config.use_type_imports)
        self.enums = EnumResolver(config, self.names)
        self.wrapper = TypeWrapper(config, self._resolve_named)
        self.scalars: Optional[ScalarMap] = None
        self.directive_mappings: Dict[str, str] = {}

    # Entry point

    def emit(self) -> PluginOutput:
        named_types = list(iter_named_types(self.schema))
        logger.info("Generating TypeScript declarations for %d types", len(named_types))

        # Strict scalar checks fail here, before anything is rendered
        self.scalars = ScalarMap(self.schema, self.config)
        self.scalars.register_imports(self.imports)
        self._build_directive_mappings()
        for named_type in named_types:
            if isinstance(named_type, GraphQLEnumType):
                self.enums.register_external(named_type, self.imports)

        declarations = [self._scalars_declaration()]
        if self.directive_mappings:
            declarations.append(self._directive_mappings_declaration())
        for named_type in named_types:
            declarations.extend(self._declarations_for(named_type))

        content = [self.renderer.render(declaration) for declaration in declarations]
        content.extend(self.imports.reexport_statements())

        prepend = (
            self.imports.import_statements()
            + self.imports.assignment_statements()
            + self._prelude()
        )
        logger.info(
            "Generated %d declarations and %d prelude lines", len(content), len(prepend)
        )
        return PluginOutput(prepend=prepend, content=content)

    # Prelude

    def _prelude(self) -> List[str]:
        export = self.config.export_prefix
        lines = [
            f"{export}type Maybe<T> = {self.config.maybe_value};",
            f"{export}type InputMaybe<T> = {self.config.input_maybe_value};",
            f"{export}type Exact<T extends {{ [key: string]: unknown }}> = "
            "{ [K in keyof T]: T[K] };",
            f"{export}type MakeOptional<T, K extends keyof T> = "
            "Omit<T, K> & { [SubKey in K]?: Maybe<T[SubKey]> };",
            f"{export}type MakeMaybe<T, K extends keyof T> = "
            "Omit<T, K> & { [SubKey in K]: Maybe<T[SubKey]> };",
        ]
        if self.config.wrap_field_definitions:
            lines.append(f"{export}type FieldWrapper<T> = {self.config.field_wrapper_value};")
        if self.config.wrap_entire_field_definitions:
            lines.append(
                f"{export}type EntireFieldWrapper<T> = {self.config.entire_field_wrapper_value};"
            )
        return lines

    # Dispatch

    def _declarations_for(self, named_type: GraphQLNamedType) -> List[Declaration]:
        if isinstance(named_type, GraphQLScalarType):
            return []
        if isinstance(named_type, GraphQLEnumType):
            if self.enums.is_external(named_type.name):
                return []
            return [self._enum_declaration(named_type)]
        if isinstance(named_type, GraphQLObjectType):
            return [self._object_declaration(named_type)] + self._args_declarations(named_type)
        if isinstance(named_type, GraphQLInterfaceType):
            return [self._interface_declaration(named_type)] + self._args_declarations(
                named_type
            )
        if isinstance(named_type, GraphQLUnionType):
            return [self._union_declaration(named_type)]
        if isinstance(named_type, GraphQLInputObjectType):
            if is_one_of_input(named_type):
                return [self._one_of_declaration(named_type)]
            return [self._input_declaration(named_type)]
        logger.warning("Skipping unsupported type %s", named_type)
        return []

    # Helpers

    def _comment(self, definition: Any) -> Optional[str]:
        return build_comment(
            getattr(definition, "description", None),
            get_deprecation_reason(definition),
            include_description=not self.config.disable_descriptions,
        )

    def _type_comment(self, named_type: GraphQLNamedType) -> Optional[str]:
        if self.config.disable_descriptions:
            return None
        return named_type.description

    def _type_reference(self, named_type: GraphQLNamedType) -> str:
        if isinstance(named_type, GraphQLScalarType):
            return ScalarMap.reference(named_type.name)
        if isinstance(named_type, GraphQLEnumType):
            return self.enums.reference(named_type)
        return self.names.type_name(named_type.name)

    def _resolve_named(self, named_type: GraphQLNamedType, is_input: bool) -> str:
        """Expression of a named type at a field or argument site."""
        if (
            not is_input
            and self.config.use_implementing_types
            and isinstance(named_type, (GraphQLInterfaceType, GraphQLUnionType))
        ):
            possible = get_possible_types(self.schema, named_type)
            if not possible:
                return "never"
            return " | ".join(self.names.type_name(t.name) for t in possible)
        return self._type_reference(named_type)

    def _typename_member(self, type_name: str) -> Optional[str]:
        if self.config.skip_typename:
            return None
        readonly = "readonly " if self.config.immutable_types else ""
        sign = "" if self.config.non_optional_typename else "?"
        return f"{readonly}__typename{sign}: '{type_name}';"

    def _output_members(self, fields: Mapping[str, GraphQLField]) -> List[str]:
        members = []
        for field_name, field in fields.items():
            spec = self.wrapper.output(field.type)
            members.append(with_comment(spec.attribute(field_name), self._comment(field)))
        return members

    def _input_members(self, fields: Mapping[str, Any]) -> List[str]:
        """Members for input fields or arguments."""
        members = []
        for field_name, field in fields.items():
            spec = self.wrapper.input(
                field.type,
                has_default=has_default_value(field),
                override=self._directive_override(field),
            )
            members.append(with_comment(spec.attribute(field_name), self._comment(field)))
        return members

    # Directive overrides

    def _build_directive_mappings(self):
        suffix = self.config.directive_argument_and_input_field_mapping_type_suffix
        for directive_name, value in self.config.directive_argument_and_input_field_mappings.items():
            mapper = parse_mapper(value, directive_name, suffix=suffix)
            self.imports.add_mapper(mapper)
            self.directive_mappings[directive_name] = mapper.type

    def _directive_override(self, definition: Any) -> Optional[str]:
        """Mapping lookup for the last mapped directive on a definition."""
        mapped = [
            name for name in get_directive_names(definition) if name in self.directive_mappings
        ]
        if not mapped:
            return None
        return f"{DIRECTIVE_MAPPINGS_TYPE_NAME}['{mapped[-1]}']"

    # Declarations

    def _scalars_declaration(self) -> Declaration:
        members = []
        for name, ts_type, description in self.scalars.members():
            comment = None if self.config.disable_descriptions else description
            members.append(with_comment(f"{name}: {ts_type};", comment))
        return Declaration(
            construct=ConstructKind.SCALARS,
            name=SCALARS_TYPE_NAME,
            members=members,
            comment=None if self.config.disable_descriptions else SCALARS_COMMENT,
            export=not self.config.no_export,
        )

    def _directive_mappings_declaration(self) -> Declaration:
        members = []
        for name, ts_type in self.directive_mappings.items():
            directive = self.schema.get_directive(name)
            comment = None
            if directive is not None and not self.config.disable_descriptions:
                comment = directive.description
            members.append(with_comment(f"{name}: {ts_type};", comment))
        return Declaration(
            construct=ConstructKind.DIRECTIVE_MAPPINGS,
            name=DIRECTIVE_MAPPINGS_TYPE_NAME,
            members=members,
            comment=None if self.config.disable_descriptions else DIRECTIVE_MAPPINGS_COMMENT,
            export=not self.config.no_export,
        )

    def _object_declaration(self, obj: GraphQLObjectType) -> Declaration:
        members = []
        typename = self._typename_member(obj.name)
        if typename:
            members.append(typename)
        members.extend(self._output_members(obj.fields))
        return Declaration(
            construct=ConstructKind.OBJECT,
            name=self.names.type_name(obj.name),
            keyword=self.config.declaration_kinds.type,
            members=members,
            bases=[self.names.type_name(i.name) for i in obj.interfaces],
            comment=self._type_comment(obj),
            export=not self.config.no_export,
        )

    def _interface_declaration(self, interface: GraphQLInterfaceType) -> Declaration:
        return Declaration(
            construct=ConstructKind.INTERFACE,
            name=self.names.type_name(interface.name),
            keyword=self.config.declaration_kinds.interface,
            members=self._output_members(interface.fields),
            bases=[self.names.type_name(i.name) for i in interface.interfaces],
            comment=self._type_comment(interface),
            export=not self.config.no_export,
        )

    def _args_declarations(
        self, owner: Union[GraphQLObjectType, GraphQLInterfaceType]
    ) -> List[Declaration]:
        declarations = []
        for field_name, field in owner.fields.items():
            if not field.args:
                continue
            declarations.append(
                Declaration(
                    construct=ConstructKind.ARGUMENTS,
                    name=self.names.args_name(owner.name, field_name),
                    keyword=self.config.declaration_kinds.arguments,
                    members=self._input_members(field.args),
                    export=not self.config.no_export,
                )
            )
        return declarations

    def _union_declaration(self, union: GraphQLUnionType) -> Declaration:
        members = [self._type_reference(member) for member in union.types]
        if self.config.future_proof_unions:
            readonly = "readonly " if self.config.immutable_types else ""
            members.append(f'{{ {readonly}__typename?: "%other" }}')
        return Declaration(
            construct=ConstructKind.UNION,
            name=self.names.type_name(union.name),
            members=members,
            comment=self._type_comment(union),
            export=not self.config.no_export,
        )

    def _input_declaration(self, input_type: GraphQLInputObjectType) -> Declaration:
        return Declaration(
            construct=ConstructKind.INPUT,
            name=self.names.type_name(input_type.name),
            keyword=self.config.declaration_kinds.input,
            members=self._input_members(input_type.fields),
            comment=self._type_comment(input_type),
            export=not self.config.no_export,
        )

    def _one_of_declaration(self, input_type: GraphQLInputObjectType) -> Declaration:
        """One variant per field: that field required, every sibling `?: never`."""
        readonly = "readonly " if self.config.immutable_types else ""
        field_names = list(input_type.fields)
        variants = []
        for index, (field_name, field) in enumerate(input_type.fields.items()):
            if is_non_null_type(field.type):
                raise OneOfInputError(input_type.name, field_name)
            ts_type = self._directive_override(field) or self.wrapper.required_input(field.type)
            parts = [
                f"{readonly}{name}: {ts_type};" if name == field_name else f"{readonly}{name}?: never;"
                for name in field_names
            ]
            variant = "{ " + " ".join(parts) + " }"
            variants.append(variant if index == 0 else f"| {variant}")
        return Declaration(
            construct=ConstructKind.ONE_OF_INPUT,
            name=self.names.type_name(input_type.name),
            members=variants or ["never"],
            comment=self._type_comment(input_type),
            export=not self.config.no_export,
        )

    def _enum_declaration(self, enum_type: GraphQLEnumType) -> Declaration:
        members = self.enums.members(enum_type)
        name = self.names.enum_name(enum_type.name)
        comment = self._type_comment(enum_type)
        export = not self.config.no_export

        if self.config.enums_as_types:
            lines = [self._enum_member(f"| {m.literal}", m) for m in members]
            if self.config.future_proof_enums:
                lines.append(f"| {FUTURE_ADDED_VALUE}")
            return Declaration(
                construct=ConstructKind.ENUM_AS_TYPE,
                name=name,
                members=lines,
                comment=comment,
                export=export,
            )

        if self.config.enums_as_const:
            return Declaration(
                construct=ConstructKind.ENUM_AS_CONST,
                name=name,
                members=[self._enum_member(f"{m.key}: {m.literal}", m) for m in members],
                comment=comment,
                export=export,
            )

        return Declaration(
            construct=ConstructKind.ENUM,
            name=name,
            members=[self._enum_member(f"{m.key} = {m.literal}", m) for m in members],
            comment=comment,
            export=export,
            const=self.config.const_enums,
        )

    def _enum_member(self, text: str, member: EnumMember) -> str:
        comment = build_comment(
            member.description,
            member.deprecation_reason,
            include_description=not self.config.disable_descriptions,
        )
        return with_comment(text, comment)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript type declarations."""

    config_class = TypeScriptConfig

    def __init__(self, config: Optional[Union[TypeScriptConfig, Mapping[str, Any]]] = None):
        """Initialize TypeScript generator with configuration."""
        if config is None:
            config = TypeScriptConfig()
        elif isinstance(config, Mapping):
            config = TypeScriptConfig.from_dict(config)
        elif not isinstance(config, TypeScriptConfig):
            raise GeneratorError(f"Invalid config type: {type(config)}")
        super().__init__(config)
        self.renderer = DeclarationRenderer(self.template_engine)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def create_template_engine(self) -> TemplateEngine:
        return create_typescript_template_engine()

    def generate(self, schema: Union[GraphQLSchema, str]) -> PluginOutput:
        """Generate declarations for a schema (object or SDL text)."""
        emitter = TypeScriptEmitter(load_schema(schema), self.config, self.renderer)
        return emitter.emit()

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """Add enum member key collisions to the base warnings."""
        schema = load_schema(schema)
        warnings = super().validate_schema(schema)
        resolver = EnumResolver(self.config, NameTable(self.config))
        for named_type in iter_named_types(schema):
            if not isinstance(named_type, GraphQLEnumType):
                continue
            if resolver.is_external(named_type.name):
                continue
            for key in resolver.find_key_collisions(named_type):
                warnings.append(
                    f"Enum '{named_type.name}' has several values resolving to key {key}; "
                    "later ones are keyed by their raw name"
                )
        return warnings


def plugin(
    schema: Union[GraphQLSchema, str],
    documents: Optional[Sequence[Any]] = None,
    config: Optional[Union[TypeScriptConfig, Mapping[str, Any]]] = None,
) -> PluginOutput:
    """
    Generate TypeScript declarations for a schema.

    Args:
        schema: GraphQLSchema or SDL text
        documents: Operation documents (accepted for interface parity, unused)
        config: TypeScriptConfig or mapping of options (camelCase or snake_case)

    Returns:
        PluginOutput with prelude lines and declaration blocks

    Raises:
        UnknownScalarError: Strict scalars and an unmapped custom scalar
        OneOfInputError: Non-null field on a @oneOf input
        ConfigError: Invalid configuration
    """
    return TypeScriptGenerator(config).generate(schema)
