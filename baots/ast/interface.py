"""TypeScript interface declaration builder."""

from __future__ import annotations

from dataclasses import dataclass

from baots.fragments import Block, CodeBuilder, Fragment, Line


@dataclass
class InterfaceField:
    """A member of an interface."""

    name: str
    ty: str
    is_optional: bool = False
    is_readonly: bool = False

    def optional(self) -> InterfaceField:
        """Mark the member as optional (``name?: type``)."""
        self.is_optional = True
        return self

    def readonly(self) -> InterfaceField:
        """Mark the member as ``readonly``."""
        self.is_readonly = True
        return self

    def render(self) -> str:
        readonly = "readonly " if self.is_readonly else ""
        optional = "?" if self.is_optional else ""
        return f"{readonly}{self.name}{optional}: {self.ty};"


class Interface:
    """An ``interface`` declaration, exported unless made private."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.fields: list[InterfaceField] = []
        self.exported = True

    def field(self, name: str, ty: str) -> Interface:
        """Add a required member."""
        return self.field_with(InterfaceField(name, ty))

    def optional_field(self, name: str, ty: str) -> Interface:
        """Add an optional member."""
        return self.field_with(InterfaceField(name, ty).optional())

    def field_with(self, field: InterfaceField) -> Interface:
        """Add a fully configured member."""
        self.fields.append(field)
        return self

    def private(self) -> Interface:
        """Do not export the interface."""
        self.exported = False
        return self

    def to_fragments(self) -> list[Fragment]:
        export = "export " if self.exported else ""
        if not self.fields:
            return [Line(f"{export}interface {self.name} {{}}")]
        return [
            Block(
                header=f"{export}interface {self.name} {{",
                body=[Line(f.render()) for f in self.fields],
                close="}",
            )
        ]

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()