import pytest

from baots.naming import (
    TS_NAMING,
    NamingConvention,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)


def test_ts_naming_type():
    assert TS_NAMING.type_name("hello-world") == "HelloWorld"
    assert TS_NAMING.type_name("get_user") == "GetUser"


def test_ts_naming_file():
    assert TS_NAMING.file_name("HelloWorld") == "hello-world"
    assert TS_NAMING.file_name("GetUser") == "get-user"


def test_ts_naming_field():
    assert TS_NAMING.field_name("user_name") == "userName"
    assert TS_NAMING.field_name("user-id") == "userId"


def test_ts_reserved_words():
    assert TS_NAMING.is_reserved("class")
    assert TS_NAMING.is_reserved("async")
    assert TS_NAMING.is_reserved("interface")
    assert not TS_NAMING.is_reserved("hello")


def test_ts_escape_reserved():
    assert TS_NAMING.safe_name("class") == "_class"
    assert TS_NAMING.safe_name("hello") == "hello"


@pytest.mark.parametrize("name", ["hello-world", "get_user", "HelloWorld", "userName"])
def test_case_round_trips(name):
    assert to_pascal_case(to_kebab_case(name)) == to_pascal_case(name)
    assert to_kebab_case(to_camel_case(name)) == to_kebab_case(name)


def test_camel_starts_lower():
    assert to_camel_case("HelloWorld") == "helloWorld"


def test_custom_convention():
    convention = NamingConvention(
        command_to_type=str.upper,
        command_to_file=str.lower,
        field_to_name=str.lower,
        reserved_words=frozenset({"x"}),
        escape_reserved=lambda n: n + "_",
    )
    assert convention.safe_name("x") == "x_"
    assert convention.type_name("ab") == "AB"