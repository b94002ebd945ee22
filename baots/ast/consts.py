"""TypeScript ``const`` declaration builder."""

from __future__ import annotations

from baots.fragments import CodeBuilder, Fragment, Line


class Const:
    """A ``const`` declaration, exported unless made private.

    A value spanning several lines is written as-is after ``=``, with no
    semicolon added, so its last line is expected to close the statement.
    """

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        self.type_annotation: str | None = None
        self.exported = True

    def ty(self, ty: str) -> Const:
        """Add a type annotation."""
        self.type_annotation = ty
        return self

    def private(self) -> Const:
        """Do not export the declaration."""
        self.exported = False
        return self

    def _head(self) -> str:
        export = "export " if self.exported else ""
        annotation = f": {self.type_annotation}" if self.type_annotation else ""
        return f"{export}const {self.name}{annotation} = "

    def to_fragments(self) -> list[Fragment]:
        if "\n" not in self.value:
            return [Line(f"{self._head()}{self.value};")]
        first, *rest = self.value.splitlines() or [""]
        return [Line(f"{self._head()}{first}"), *(Line(line) for line in rest)]

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()