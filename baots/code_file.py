"""Structured generation of a whole TypeScript source file."""

from __future__ import annotations

from typing import Iterable

from baots.ast.exports import Export
from baots.ast.imports import Import
from baots.fragments import TYPESCRIPT_INDENT, CodeBuilder, Fragment, Line, Renderable


class CodeFile:
    """A file made of imports, body elements and exports, in that order.

    Sections are separated by blank lines, as are body elements.
    """

    def __init__(self) -> None:
        self._imports: list[Import] = []
        self._body: list[list[Fragment]] = []
        self._exports: list[Export] = []

    def import_(self, import_: Import) -> CodeFile:
        self._imports.append(import_)
        return self

    def imports(self, imports: Iterable[Import]) -> CodeFile:
        self._imports.extend(imports)
        return self

    def add(self, node: Renderable) -> CodeFile:
        """Add a body element."""
        self._body.append(list(node.to_fragments()))
        return self

    def add_all(self, nodes: Iterable[Renderable]) -> CodeFile:
        for node in nodes:
            self.add(node)
        return self

    def export(self, export: Export) -> CodeFile:
        self._exports.append(export)
        return self

    def exports(self, exports: Iterable[Export]) -> CodeFile:
        self._exports.extend(exports)
        return self

    def render(self) -> str:
        """Render with two-space indentation."""
        return self.render_with_indent(TYPESCRIPT_INDENT)

    def render_with_indent(self, indent: str) -> str:
        builder = CodeBuilder(indent)
        for import_ in self._imports:
            builder.emit(import_)
        if self._imports and (self._body or self._exports):
            builder.push_blank()
        for position, fragments in enumerate(self._body):
            if position:
                builder.push_blank()
            for fragment in fragments:
                builder.apply_fragment(fragment)
        if self._body and self._exports:
            builder.push_blank()
        for export in self._exports:
            builder.emit(export)
        return builder.build()

    def is_empty(self) -> bool:
        return not (self._imports or self._body or self._exports)


class RawCode:
    """Verbatim code added to a file body, one line per source line."""

    def __init__(self, code: str) -> None:
        self.code = code

    @classmethod
    def lines(cls, lines: Iterable[str]) -> RawCode:
        return cls("\n".join(lines))

    def to_fragments(self) -> list[Fragment]:
        return [Line(line) for line in self.code.splitlines()]