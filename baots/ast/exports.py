"""TypeScript export statement builder."""

from __future__ import annotations

from dataclasses import dataclass, field

from baots.fragments import CodeBuilder, Fragment, Line


@dataclass
class Export:
    """An ``export`` statement, optionally re-exporting from a module.

    Combinations that TypeScript has no syntax for render as nothing.
    """

    module: str | None = None
    default_name: str | None = None
    names: list[str] = field(default_factory=list)
    is_type_only: bool = False

    def from_(self, module: str) -> Export:
        """Re-export from ``module``."""
        self.module = module
        return self

    def default(self, name: str) -> Export:
        self.default_name = name
        return self

    def named(self, name: str) -> Export:
        self.names.append(name)
        return self

    def type_only(self) -> Export:
        """Make this an ``export type`` statement."""
        self.is_type_only = True
        return self

    def _format(self) -> str | None:
        type_kw = "type " if self.is_type_only else ""
        named = ", ".join(self.names)
        if self.module is not None:
            if self.default_name is not None:
                return None
            if not self.names:
                return f'export * from "{self.module}";'
            return f'export {type_kw}{{ {named} }} from "{self.module}";'
        if self.default_name is not None:
            return None if self.names else f"export default {self.default_name};"
        if self.names:
            return f"export {type_kw}{{ {named} }};"
        return None

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        text = self._format()
        return builder if text is None else builder.line(text)

    def build(self) -> str:
        return self.render(CodeBuilder()).build()

    def to_fragments(self) -> list[Fragment]:
        text = self._format()
        return [] if text is None else [Line(text)]