"""Code fragments and the line-oriented builder that renders them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Union

TYPESCRIPT_INDENT = "  "


@dataclass(frozen=True)
class Line:
    """A complete line of code."""

    text: str


@dataclass(frozen=True)
class Raw:
    """Text written as-is, without a trailing newline."""

    text: str


@dataclass(frozen=True)
class JsDoc:
    """A documentation comment."""

    text: str


@dataclass(frozen=True)
class Block:
    """A header line, an indented body and an optional closing line."""

    header: str
    body: tuple = ()
    close: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


Fragment = Union[Line, Raw, JsDoc, Block]


class Renderable(Protocol):
    """Anything that can describe itself as a sequence of fragments."""

    def to_fragments(self) -> list[Fragment]: ...


class CodeBuilder:
    """Accumulates source text with indentation tracking.

    Every method returns the builder itself so that calls can be chained.
    Indentation is written only at the start of a line, so ``raw`` text
    followed by ``line`` continues the same line.
    """

    def __init__(self, indent: str = TYPESCRIPT_INDENT) -> None:
        self._unit = indent
        self._level = 0
        self._parts: list[str] = []
        self._at_line_start = True

    def _write(self, text: str) -> None:
        if not text:
            return
        if self._at_line_start:
            self._parts.append(self._unit * self._level)
            self._at_line_start = False
        self._parts.append(text)

    def line(self, text: str) -> CodeBuilder:
        """Write ``text`` and end the line."""
        self._write(text)
        self._parts.append("\n")
        self._at_line_start = True
        return self

    def raw(self, text: str) -> CodeBuilder:
        """Write ``text`` without ending the line."""
        self._write(text)
        return self

    def push_blank(self) -> CodeBuilder:
        """Write an empty line, ending the current one first if needed."""
        if not self._at_line_start:
            self._parts.append("\n")
        self._parts.append("\n")
        self._at_line_start = True
        return self

    def indent(self) -> CodeBuilder:
        self._level += 1
        return self

    def dedent(self) -> CodeBuilder:
        if self._level == 0:
            raise ValueError("cannot dedent below the top level")
        self._level -= 1
        return self

    def jsdoc(self, text: str) -> CodeBuilder:
        """Write a ``/** ... */`` comment."""
        lines = text.splitlines()
        if len(lines) <= 1:
            return self.line(f"/** {text} */")
        self.line("/**")
        for doc_line in lines:
            self.line(f" * {doc_line}".rstrip())
        return self.line(" */")

    def emit(self, node: Renderable) -> CodeBuilder:
        """Render every fragment of ``node``."""
        for fragment in node.to_fragments():
            self.apply_fragment(fragment)
        return self

    def apply_fragment(self, fragment: Fragment) -> CodeBuilder:
        match fragment:
            case Line(text):
                self.line(text)
            case Raw(text):
                self.raw(text)
            case JsDoc(text):
                self.jsdoc(text)
            case Block(header, body, close):
                self.line(header).indent()
                self._apply_all(body)
                self.dedent()
                if close is not None:
                    self.line(close)
            case _:
                raise TypeError(f"unknown fragment: {fragment!r}")
        return self

    def _apply_all(self, fragments: Iterable[Fragment]) -> None:
        for fragment in fragments:
            self.apply_fragment(fragment)

    def build(self) -> str:
        """Return the text written so far."""
        return "".join(self._parts)