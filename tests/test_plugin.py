import pytest

from gql_typegen import ConfigError, PluginOutput, TypeScriptConfig, plugin
from gql_typegen.codegen import generate_from_schema, quick_generate
from gql_typegen.codegen.core.generator import generate_code
from gql_typegen.codegen.core.schema import load_schema
from gql_typegen.codegen.languages.typescript import (
    TypeScriptGenerator,
    create_generator,
    create_immutable_generator,
    create_strict_generator,
)
from gql_typegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)

PRELUDE = [
    "export type Maybe<T> = T | null;",
    "export type InputMaybe<T> = Maybe<T>;",
    "export type Exact<T extends { [key: string]: unknown }> = { [K in keyof T]: T[K] };",
    "export type MakeOptional<T, K extends keyof T> = "
    "Omit<T, K> & { [SubKey in K]?: Maybe<T[SubKey]> };",
    "export type MakeMaybe<T, K extends keyof T> = "
    "Omit<T, K> & { [SubKey in K]: Maybe<T[SubKey]> };",
]


class TestPluginOutput:
    def test_prelude(self, basic_sdl):
        assert plugin(basic_sdl).prepend == PRELUDE

    def test_prelude_without_export(self, basic_sdl):
        prepend = plugin(basic_sdl, [], {"noExport": True}).prepend
        assert prepend[0] == "type Maybe<T> = T | null;"
        assert not any(line.startswith("export") for line in prepend)

    def test_imports_come_first(self, basic_sdl):
        prepend = plugin(basic_sdl, [], {"scalars": {"DateTime": "./scalars#DateTime"}}).prepend
        assert prepend[0] == "import { DateTime } from './scalars';"
        assert prepend[1:] == PRELUDE

    def test_merged_layout(self):
        output = PluginOutput(prepend=["a;", "b;"], content=["x", "y"])
        assert output.merged() == "a;\nb;\n\nx\n\ny\n"
        assert PluginOutput().merged() == ""

    def test_idempotent(self, basic_sdl):
        config = {"futureProofEnums": True, "typesPrefix": "I", "useImplementingTypes": True}
        assert plugin(basic_sdl, [], config).merged() == plugin(basic_sdl, [], config).merged()

    def test_generator_reuse_is_idempotent(self, basic_sdl):
        generator = TypeScriptGenerator({"enumValues": {"Role": "./enums#Role"}})
        first = generator.generate(basic_sdl).merged()
        assert generator.generate(basic_sdl).merged() == first
        assert first.count("import { Role } from './enums';") == 1

    def test_documents_are_ignored(self, basic_sdl):
        assert plugin(basic_sdl, ["query { x }"]).merged() == plugin(basic_sdl).merged()

    def test_config_object_accepted(self, basic_sdl):
        config = TypeScriptConfig(types_prefix="I")
        assert "export type IUser" in plugin(basic_sdl, [], config).merged()

    def test_invalid_config(self, basic_sdl):
        with pytest.raises(ConfigError):
            plugin(basic_sdl, [], {"enumsAsTypes": True, "constEnums": True})


class TestGenerateCode:
    def test_success_metadata(self, basic_sdl):
        result = generate_from_schema(basic_sdl)
        assert result.success
        assert result.metadata["language"] == "typescript"
        assert result.metadata["file_extension"] == ".ts"
        assert result.metadata["prelude_lines"] == len(PRELUDE)
        assert "export type User" in result.code

    def test_failure_is_captured(self):
        generator = TypeScriptGenerator({"strictScalars": True})
        result = generate_code(generator, load_schema("scalar Money"))
        assert not result.success
        assert result.error_message == "Unknown scalar type Money"
        assert result.code == ""

    def test_warnings(self):
        result = generate_code(TypeScriptGenerator(), load_schema("enum E { FOO_BAR FooBar }"))
        assert result.success
        assert result.warnings == [
            "Enum 'E' has several values resolving to key FooBar; "
            "later ones are keyed by their raw name"
        ]

    def test_quick_generate(self):
        assert "export type Thing = {" in quick_generate("type Thing { id: ID }")
        with pytest.raises(RuntimeError, match="Unknown scalar type Money"):
            quick_generate("scalar Money", strictScalars=True)


class TestRegistry:
    def test_builtin_languages(self):
        assert list_supported_languages() == ["typescript"]
        assert is_language_supported("TS")
        assert isinstance(get_generator("ts"), TypeScriptGenerator)

    def test_config_mapping(self):
        generator = get_generator("typescript", {"typesPrefix": "I"})
        assert generator.config.types_prefix == "I"

    def test_language_info(self):
        info = get_language_info("ts")
        assert info["name"] == "typescript"
        assert info["aliases"] == ["ts"]
        assert info["class"] == "TypeScriptGenerator"

    def test_unknown_language(self):
        with pytest.raises(RegistryError, match="No generator registered"):
            get_generator("cobol")

    def test_invalid_config_wrapped(self):
        with pytest.raises(RegistryError, match="Failed to create"):
            get_generator("ts", {"enumsAsTypes": True, "enumsAsConst": True})

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
        with pytest.raises(RegistryError, match="already points"):
            registry.register("other", TypeScriptGenerator, aliases=["ts"])

    def test_unregister(self):
        registry = GeneratorRegistry()
        registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
        registry.unregister("ts")
        assert registry.list_languages() == []
        assert not registry.is_supported("ts")

    def test_rejects_non_generators(self):
        with pytest.raises(RegistryError):
            GeneratorRegistry().register("x", dict)


class TestFactories:
    def test_create_generator(self, basic_sdl):
        output = create_generator(typesPrefix="I").generate(basic_sdl).merged()
        assert "export type IUser" in output

    def test_strict_generator(self):
        generator = create_strict_generator({"DateTime": "string"})
        assert generator.config.strict_scalars
        assert generator.config.enums_as_types
        assert generator.config.avoid.field

    def test_immutable_generator(self, basic_sdl):
        output = create_immutable_generator().generate(basic_sdl).merged()
        assert "readonly __typename: 'User';" in output
        assert "role: Role | '%future added value';" in output
