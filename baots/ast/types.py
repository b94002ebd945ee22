"""TypeScript type alias, object type and union builders."""

from __future__ import annotations

from dataclasses import dataclass

from baots.fragments import Block, CodeBuilder, Fragment, JsDoc, Line


def _type_head(exported: bool, name: str) -> str:
    """Return the start of a type declaration, up to and including ``= ``."""
    prefix = "export " if exported else ""
    return f"{prefix}type {name} = "


@dataclass
class Field:
    """A member of an object type."""

    name: str
    ty: str
    doc_text: str | None = None
    is_optional: bool = False
    is_readonly: bool = False

    def doc(self, doc: str) -> Field:
        self.doc_text = doc
        return self

    def optional(self) -> Field:
        self.is_optional = True
        return self

    def readonly(self) -> Field:
        self.is_readonly = True
        return self

    def to_fragments(self) -> list[Fragment]:
        fragments: list[Fragment] = []
        if self.doc_text is not None:
            fragments.append(JsDoc(self.doc_text))
        readonly = "readonly " if self.is_readonly else ""
        optional = "?" if self.is_optional else ""
        fragments.append(Line(f"{readonly}{self.name}{optional}: {self.ty};"))
        return fragments


class ObjectType:
    """An object type declaration: ``type Foo = { ... };``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.doc_text: str | None = None
        self.fields: list[Field] = []
        self.exported = True

    def doc(self, doc: str) -> ObjectType:
        self.doc_text = doc
        return self

    def field(self, field: Field) -> ObjectType:
        self.fields.append(field)
        return self

    def private(self) -> ObjectType:
        self.exported = False
        return self

    def to_fragments(self) -> list[Fragment]:
        fragments: list[Fragment] = []
        if self.doc_text is not None:
            fragments.append(JsDoc(self.doc_text))
        head = _type_head(self.exported, self.name)
        if not self.fields:
            fragments.append(Line(f"{head}{{}};"))
        else:
            body = [frag for f in self.fields for frag in f.to_fragments()]
            fragments.append(Block(header=f"{head}{{", body=body, close="};"))
        return fragments

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()


class TypeAlias:
    """A type alias: ``type Name = type;``."""

    def __init__(self, name: str, ty: str) -> None:
        self.name = name
        self.ty = ty
        self.doc_text: str | None = None
        self.exported = True

    def doc(self, doc: str) -> TypeAlias:
        self.doc_text = doc
        return self

    def private(self) -> TypeAlias:
        self.exported = False
        return self

    def to_fragments(self) -> list[Fragment]:
        fragments: list[Fragment] = []
        if self.doc_text is not None:
            fragments.append(JsDoc(self.doc_text))
        fragments.append(Line(f"{_type_head(self.exported, self.name)}{self.ty};"))
        return fragments

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()


class Union:
    """A union type: ``type Name = A | B;``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.doc_text: str | None = None
        self.variants: list[str] = []
        self.exported = True

    def doc(self, doc: str) -> Union:
        self.doc_text = doc
        return self

    def variant(self, variant: str) -> Union:
        self.variants.append(variant)
        return self

    def private(self) -> Union:
        self.exported = False
        return self

    def to_fragments(self) -> list[Fragment]:
        fragments: list[Fragment] = []
        if self.doc_text is not None:
            fragments.append(JsDoc(self.doc_text))
        variants = " | ".join(self.variants)
        fragments.append(Line(f"{_type_head(self.exported, self.name)}{variants};"))
        return fragments

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()