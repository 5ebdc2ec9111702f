import pytest

from gql_typegen.codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    convert_name_parts,
    is_identifier,
    resolve_naming_case,
    split_words,
    to_camel_case,
    to_constant_case,
    to_pascal_case,
    to_snake_case,
)
from gql_typegen.codegen.languages.typescript import NameTable, TypeScriptConfig


class TestCaseConversion:
    def test_split_words_on_case_boundaries(self):
        assert split_words("userProfileID") == ["user", "Profile", "ID"]
        assert split_words("HTTPResponse") == ["HTTP", "Response"]
        assert split_words("my-type_name") == ["my", "type", "name"]

    def test_pascal_case(self):
        assert to_pascal_case("user_profile") == "UserProfile"
        assert to_pascal_case("HTTPResponse") == "HttpResponse"
        assert to_pascal_case("RED") == "Red"

    def test_camel_case(self):
        assert to_camel_case("UserProfile") == "userProfile"
        assert to_camel_case("") == ""

    def test_constant_and_snake_case(self):
        assert to_constant_case("userProfile") == "USER_PROFILE"
        assert to_snake_case("maybeValue") == "maybe_value"
        assert to_snake_case("avoidOptionals") == "avoid_optionals"

    def test_underscore_parts_kept_by_default(self):
        assert convert_name_parts("My_type", NamingCase.PASCAL_CASE) == "My_Type"
        assert (
            convert_name_parts("My_type", NamingCase.PASCAL_CASE, transform_underscore=True)
            == "MyType"
        )

    def test_keep_leaves_name_alone(self):
        assert convert_name_parts("my_Weird_name", NamingCase.KEEP) == "my_Weird_name"


class TestResolveNamingCase:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("pascalCase", NamingCase.PASCAL_CASE),
            ("change-case-all#camelCase", NamingCase.CAMEL_CASE),
            ("keep", NamingCase.KEEP),
            ("constantCase", NamingCase.CONSTANT_CASE),
            (None, NamingCase.PASCAL_CASE),
        ],
    )
    def test_known_spellings(self, value, expected):
        assert resolve_naming_case(value) is expected

    def test_unknown_spelling(self):
        with pytest.raises(ValueError, match="Unknown naming convention"):
            resolve_naming_case("sPoNgEcAsE")


def test_is_identifier():
    assert is_identifier("_Test")
    assert is_identifier("$value")
    assert not is_identifier("1abc")
    assert not is_identifier("a-b")


def test_sanitizer_caches_conversions():
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("user_name") == "User_Name"
    assert sanitizer.sanitize_name("user_name", NamingCase.CAMEL_CASE, True) == "userName"
    sanitizer.reset()
    assert sanitizer.sanitize_name("user") == "User"


class TestNameTable:
    def test_enum_keys_drop_underscores(self):
        names = NameTable(TypeScriptConfig())
        keys = [names.enum_key("MyEnum", v) for v in ("A_B_C", "X_Y_Z", "_TEST", "My_Value")]
        assert keys == ["ABC", "XYZ", "Test", "MyValue"]

    def test_enum_key_quoted_when_not_identifier(self):
        names = NameTable(TypeScriptConfig())
        assert names.enum_key("E", "_1") == "'1'"

    def test_keep_convention_leaves_enum_keys(self):
        names = NameTable(TypeScriptConfig(naming_convention="keep"))
        assert names.enum_key("E", "valid_name") == "valid_name"

    def test_prefix_and_suffix(self):
        names = NameTable(TypeScriptConfig(types_prefix="I", types_suffix="Type"))
        assert names.type_name("user") == "IUserType"

    def test_enum_prefix_disabled(self):
        names = NameTable(TypeScriptConfig(types_prefix="I", enum_prefix=False))
        assert names.enum_name("Role") == "Role"
        assert names.type_name("User") == "IUser"

    def test_args_name(self):
        assert NameTable(TypeScriptConfig()).args_name("Query", "user") == "QueryUserArgs"
        underscored = NameTable(TypeScriptConfig(add_underscore_to_args_type=True))
        assert underscored.args_name("Query", "user") == "Query_UserArgs"

    def test_args_name_carries_prefix(self):
        names = NameTable(TypeScriptConfig(types_prefix="I"))
        assert names.args_name("Query", "user") == "IQueryUserArgs"
