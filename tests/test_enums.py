from graphql import build_schema

from gql_typegen.codegen.languages.typescript import EnumResolver, NameTable, TypeScriptConfig, TypeScriptGenerator

SDL = """
\"\"\"Access level\"\"\"
enum Role {
  \"\"\"Full access\"\"\"
  ADMIN
  MEMBER
  GUEST @deprecated(reason: "No longer issued")
}

type User {
  role: Role!
  previous: [Role]
}
"""

MY_ENUM_SDL = """
enum MyEnum {
  A_B_C
  X_Y_Z
  _TEST
  My_Value
}
"""


def test_regular_enum(generate, assert_block):
    output = generate(SDL)
    assert_block(
        output,
        """
        /** Access level */
        export enum Role {
          /** Full access */
          Admin = 'ADMIN',
          Member = 'MEMBER',
          /** @deprecated No longer issued */
          Guest = 'GUEST'
        }
        """,
    )


def test_identifiers_drop_underscores(generate, assert_block):
    output = generate(MY_ENUM_SDL)
    assert_block(
        output,
        """
        export enum MyEnum {
          ABC = 'A_B_C',
          XYZ = 'X_Y_Z',
          Test = '_TEST',
          MyValue = 'My_Value'
        }
        """,
    )


def test_enum_usage_sites(generate, assert_block):
    output = generate(SDL)
    assert_block(output, "role: Role;")
    assert_block(output, "previous?: Maybe<Array<Maybe<Role>>>;")


def test_enums_as_types(generate, assert_block):
    output = generate(SDL, enumsAsTypes=True, futureProofEnums=True)
    assert_block(
        output,
        """
        export type Role =
          /** Full access */
          | 'ADMIN'
          | 'MEMBER'
          /** @deprecated No longer issued */
          | 'GUEST'
          | '%future added value';
        """,
    )
    assert_block(output, "role: Role;")


def test_enums_as_const_with_numeric_override(generate, assert_block):
    output = generate(
        SDL,
        enumsAsConst=True,
        enumValues={"Role": {"ADMIN": 1}},
        disableDescriptions=True,
    )
    assert_block(
        output,
        """
        export const Role = {
          Admin: 1,
          Member: 'MEMBER',
          /** @deprecated No longer issued */
          Guest: 'GUEST'
        } as const;

        export type Role = typeof Role[keyof typeof Role];
        """,
    )


def test_const_enum(generate, assert_block):
    output = generate(MY_ENUM_SDL, constEnums=True)
    assert_block(output, "export const enum MyEnum { ABC = 'A_B_C',")
    assert_block(output, "MyValue = 'My_Value' };")


def test_numeric_enums(generate, assert_block):
    output = generate(MY_ENUM_SDL, numericEnums=True)
    assert_block(output, "ABC = 0, XYZ = 1, Test = 2, MyValue = 3 }")


def test_string_override(generate, assert_block):
    output = generate(SDL, enumValues={"Role": {"MEMBER": "member"}})
    assert_block(output, "Member = 'member',")


def test_future_proof_and_string_types_at_usage(generate, assert_block):
    output = generate(SDL, futureProofEnums=True, allowEnumStringTypes=True)
    assert_block(output, "role: Role | '%future added value' | `${Role}`;")


def test_enum_prefix(generate, assert_block):
    output = generate(SDL + "\ntype Extra { r: Role }", typesPrefix="I")
    assert_block(output, "export enum IRole {")
    assert_block(output, "export type IUser = {")

    output = generate(SDL, typesPrefix="I", enumPrefix=False)
    assert_block(output, "export enum Role {")
    assert_block(output, "export type IUser = {")
    assert_block(output, "role: Role;")


class TestExternalEnums:
    def test_named_import(self, generate, assert_block, refute_block):
        output = generate(SDL, enumValues={"Role": "./enums#Role"})
        assert output.startswith("import { Role } from './enums';\n")
        refute_block(output, "export enum Role")
        assert output.rstrip().endswith("export { Role };")
        assert_block(output, "role: Role;")

    def test_namespace_member(self, generate, assert_block):
        output = generate(SDL, enumValues={"Role": "./enums#NS.AccessRole"})
        assert_block(output, "import { NS } from './enums'; import Role = NS.AccessRole;")

    def test_module_shorthand(self, generate, assert_block):
        output = generate(SDL, enumValues="./enums")
        assert_block(output, "import { Role } from './enums';")

    def test_no_export_skips_reexport(self, generate, refute_block):
        output = generate(SDL, enumValues={"Role": "./enums#Role"}, noExport=True)
        refute_block(output, "export { Role };")

    def test_value_imports_even_with_type_imports(self, generate):
        output = generate(SDL, enumValues={"Role": "./enums#Role"}, useTypeImports=True)
        assert output.startswith("import { Role } from './enums';\n")


class TestEnumResolver:
    def test_members_keep_schema_order(self):
        schema = build_schema(MY_ENUM_SDL)
        resolver = EnumResolver(TypeScriptConfig(), NameTable(TypeScriptConfig()))
        members = resolver.members(schema.type_map["MyEnum"])
        assert [(m.key, m.literal) for m in members] == [
            ("ABC", "'A_B_C'"),
            ("XYZ", "'X_Y_Z'"),
            ("Test", "'_TEST'"),
            ("MyValue", "'My_Value'"),
        ]

    def test_key_collisions_reported(self):
        schema = build_schema("enum Clash { FOO_BAR FooBar }")
        resolver = EnumResolver(TypeScriptConfig(), NameTable(TypeScriptConfig()))
        assert resolver.find_key_collisions(schema.type_map["Clash"]) == ["FooBar"]

        warnings = TypeScriptGenerator().validate_schema(schema)
        assert warnings[0].startswith("Enum 'Clash' has several values resolving to key FooBar")

    def test_colliding_keys_fall_back_to_raw_names(self):
        schema = build_schema("enum Clash { FOO _FOO FOO_BAR FooBar }")
        resolver = EnumResolver(TypeScriptConfig(), NameTable(TypeScriptConfig()))
        keys = [m.key for m in resolver.members(schema.type_map["Clash"])]
        assert keys == ["Foo", "'_FOO'", "FooBar", "'FooBar_2'"]


def test_colliding_keys_stay_unique(generate, assert_block):
    output = generate("enum E { FOO, _FOO }")
    assert_block(output, "export enum E { Foo = 'FOO', '_FOO' = '_FOO' }")
