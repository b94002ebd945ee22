from baots.ast.consts import Const
from baots.fragments import CodeBuilder, Line


def test_simple_const():
    assert Const("foo", "42").build() == "export const foo = 42;\n"


def test_const_with_type():
    c = Const("name", '"hello"').ty("string").build()
    assert c == 'export const name: string = "hello";\n'


def test_private_const():
    assert Const("secret", "123").private().build() == "const secret = 123;\n"


def test_const_with_object():
    c = Const("config", "{ debug: true }").build()
    assert c == "export const config = { debug: true };\n"


def test_multiline_value_has_no_added_semicolon():
    c = Const("app", 'defineCli({\n  name: "x",\n})').build()
    assert c == 'export const app = defineCli({\n  name: "x",\n})\n'


def test_multiline_fragments():
    fragments = Const("a", "f(\n1\n)").private().to_fragments()
    assert fragments == [Line("const a = f("), Line("1"), Line(")")]


def test_render_respects_builder_indentation():
    builder = CodeBuilder().indent()
    assert Const("x", "1").render(builder).build() == "  export const x = 1;\n"