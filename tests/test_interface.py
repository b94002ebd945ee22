from baots.ast.interface import Interface, InterfaceField
from baots.fragments import CodeBuilder


def test_empty_interface():
    assert Interface("Empty").build() == "export interface Empty {}\n"


def test_interface_with_fields():
    i = Interface("Person").field("name", "string").field("age", "number").build()
    assert "export interface Person {" in i
    assert "name: string;" in i
    assert "age: number;" in i


def test_interface_layout():
    i = Interface("Person").field("name", "string").field("age", "number").build()
    assert i == "export interface Person {\n  name: string;\n  age: number;\n}\n"


def test_interface_with_optional_field():
    i = (
        Interface("Config")
        .field("required", "string")
        .optional_field("optional", "number")
        .build()
    )
    assert "required: string;" in i
    assert "optional?: number;" in i


def test_private_interface():
    i = Interface("Internal").private().field("x", "number").build()
    assert "export" not in i
    assert "interface Internal {" in i


def test_readonly_field():
    i = Interface("Point").field_with(InterfaceField("x", "number").readonly()).build()
    assert "readonly x: number;" in i


def test_readonly_optional_field():
    field = InterfaceField("y", "number").readonly().optional()
    assert field.render() == "readonly y?: number;"


def test_render_matches_build():
    iface = Interface("A").field("a", "string")
    assert iface.render(CodeBuilder()).build() == iface.build()