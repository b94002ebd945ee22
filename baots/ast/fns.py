"""TypeScript function declaration builder."""

from __future__ import annotations

from dataclasses import dataclass

from baots.fragments import Block, CodeBuilder, Fragment, JsDoc, Line


@dataclass
class Param:
    """A function parameter with a type annotation."""

    name: str
    ty: str
    is_optional: bool = False

    def optional(self) -> Param:
        """Mark the parameter as optional (``name?: type``)."""
        self.is_optional = True
        return self

    def render(self) -> str:
        return f"{self.name}{'?' if self.is_optional else ''}: {self.ty}"


class Fn:
    """A ``function`` declaration, exported unless made private."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.doc_text: str | None = None
        self.exported = True
        self.is_async = False
        self.params: list[Param] = []
        self.return_type: str | None = None
        self.body_lines: list[str] = []

    def doc(self, doc: str) -> Fn:
        self.doc_text = doc
        return self

    def private(self) -> Fn:
        self.exported = False
        return self

    def async_(self) -> Fn:
        self.is_async = True
        return self

    def param(self, param: Param) -> Fn:
        self.params.append(param)
        return self

    def returns(self, ty: str) -> Fn:
        self.return_type = ty
        return self

    def body_line(self, line: str) -> Fn:
        """Add one line to the body."""
        self.body_lines.append(line)
        return self

    def body(self, content: str) -> Fn:
        """Add every line of ``content`` to the body."""
        self.body_lines.extend(content.splitlines())
        return self

    def _signature(self) -> str:
        export = "export " if self.exported else ""
        async_kw = "async " if self.is_async else ""
        params = ", ".join(p.render() for p in self.params)
        returns = f": {self.return_type}" if self.return_type is not None else ""
        return f"{export}{async_kw}function {self.name}({params}){returns} {{"

    def to_fragments(self) -> list[Fragment]:
        fragments: list[Fragment] = []
        if self.doc_text is not None:
            fragments.append(JsDoc(self.doc_text))
        fragments.append(
            Block(
                header=self._signature(),
                body=[Line(line) for line in self.body_lines],
                close="}",
            )
        )
        return fragments

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()