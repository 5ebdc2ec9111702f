from types import SimpleNamespace

import pytest
from graphql import Undefined, build_schema

from gql_typegen.codegen.core.schema import has_default_value
from gql_typegen.codegen.languages.typescript import TypeScriptConfig, TypeWrapper

SDL = """
type Sample {
  required: String!
  optional: String
  requiredList: [String!]!
  listOfNullable: [String]!
  nullableList: [String!]
  nested: [[Int!]]
}

input SampleInput {
  required: String!
  optional: String
  withDefault: Int = 3
  requiredWithDefault: Int! = 3
  list: [String!]
}
"""


class TestNullabilityComposition:
    @pytest.mark.parametrize(
        "member",
        [
            "required: Scalars['String'];",
            "optional?: Maybe<Scalars['String']>;",
            "requiredList: Array<Scalars['String']>;",
            "listOfNullable: Array<Maybe<Scalars['String']>>;",
            "nullableList?: Maybe<Array<Scalars['String']>>;",
            "nested?: Maybe<Array<Maybe<Array<Scalars['Int']>>>>;",
        ],
    )
    def test_output_fields(self, generate, assert_block, member):
        assert_block(generate(SDL), member)

    @pytest.mark.parametrize(
        "member",
        [
            "required: Scalars['String'];",
            "optional?: InputMaybe<Scalars['String']>;",
            "withDefault?: InputMaybe<Scalars['Int']>;",
            "requiredWithDefault?: Scalars['Int'];",
            "list?: InputMaybe<Array<Scalars['String']>>;",
        ],
    )
    def test_input_fields(self, generate, assert_block, member):
        assert_block(generate(SDL), member)


class TestAvoidOptionals:
    def test_blanket(self, generate, assert_block):
        output = generate(SDL, avoidOptionals=True)
        assert_block(output, "optional: Maybe<Scalars['String']>;")
        assert_block(output, "optional: InputMaybe<Scalars['String']>;")
        assert_block(output, "withDefault?: InputMaybe<Scalars['Int']>;")

    def test_field_only(self, generate, assert_block):
        output = generate(SDL, avoidOptionals={"field": True})
        assert_block(output, "optional: Maybe<Scalars['String']>;")
        assert_block(output, "optional?: InputMaybe<Scalars['String']>;")

    def test_default_value(self, generate, assert_block):
        output = generate(SDL, avoidOptionals={"inputValue": True, "defaultValue": True})
        assert_block(output, "withDefault: InputMaybe<Scalars['Int']>;")
        assert_block(output, "requiredWithDefault: Scalars['Int'];")


def test_custom_maybe_values(generate, assert_block):
    output = generate(SDL, maybeValue="T | null | undefined", inputMaybeValue="T | undefined")
    assert_block(output, "export type Maybe<T> = T | null | undefined;")
    assert_block(output, "export type InputMaybe<T> = T | undefined;")


def test_field_wrapper_sits_inside_maybe(generate, assert_block):
    output = generate(SDL, wrapFieldDefinitions=True, fieldWrapperValue="T | Promise<T>")
    assert_block(output, "export type FieldWrapper<T> = T | Promise<T>;")
    assert_block(output, "optional?: Maybe<FieldWrapper<Scalars['String']>>;")
    assert_block(output, "requiredList: Array<FieldWrapper<Scalars['String']>>;")
    # Inputs are never wrapped
    assert_block(output, "optional?: InputMaybe<Scalars['String']>;")


def test_entire_field_wrapper_outermost(generate, assert_block):
    output = generate(
        SDL,
        wrapFieldDefinitions=True,
        wrapEntireFieldDefinitions=True,
        entireFieldWrapperValue="T | (() => T)",
    )
    assert_block(output, "export type EntireFieldWrapper<T> = T | (() => T);")
    assert_block(
        output, "optional?: EntireFieldWrapper<Maybe<FieldWrapper<Scalars['String']>>>;"
    )


def test_immutable_types(generate, assert_block):
    output = generate(SDL, immutableTypes=True)
    assert_block(output, "readonly __typename?: 'Sample';")
    assert_block(output, "readonly requiredList: ReadonlyArray<Scalars['String']>;")
    assert_block(output, "readonly list?: InputMaybe<ReadonlyArray<Scalars['String']>>;")


def test_wrapper_spec_directly():
    schema = build_schema(SDL)
    wrapper = TypeWrapper(TypeScriptConfig(), lambda named, is_input: named.name)
    field = schema.type_map["Sample"].fields["listOfNullable"]
    spec = wrapper.output(field.type)
    assert spec.type == "Array<Maybe<String>>"
    assert not spec.optional
    assert spec.attribute("xs") == "xs: Array<Maybe<String>>;"

    input_field = schema.type_map["SampleInput"].fields["list"]
    assert wrapper.required_input(input_field.type) == "Array<String>"


def test_argument_defaults_make_attribute_optional(generate, assert_block):
    output = generate('type Q { f(b: String! = "x", c: Int = 1): Int }')
    assert_block(output, "b?: Scalars['String'];")
    assert_block(output, "c?: InputMaybe<Scalars['Int']>;")


def test_has_default_value():
    schema = build_schema(SDL)
    fields = schema.type_map["SampleInput"].fields
    assert has_default_value(fields["withDefault"])
    assert has_default_value(fields["requiredWithDefault"])
    assert not has_default_value(fields["optional"])

    # Defaults stored apart from default_value
    assert has_default_value(SimpleNamespace(default_value=Undefined, default=object()))
    assert not has_default_value(SimpleNamespace(default_value=Undefined, default=None))
