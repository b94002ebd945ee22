"""TypeScript import statement builder."""

from __future__ import annotations

from dataclasses import dataclass, field

from baots.fragments import CodeBuilder, Fragment, Line


@dataclass
class _NamedImport:
    name: str
    is_type: bool = False

    def render(self) -> str:
        return f"type {self.name}" if self.is_type else self.name


@dataclass
class Import:
    """An ``import`` statement from one module."""

    source: str
    default_name: str | None = None
    names: list[_NamedImport] = field(default_factory=list)
    is_type_only: bool = False

    def default(self, name: str) -> Import:
        """Import the default export as ``name``."""
        self.default_name = name
        return self

    def named(self, name: str) -> Import:
        self.names.append(_NamedImport(name))
        return self

    def named_type(self, name: str) -> Import:
        """Import a named export with an inline ``type`` keyword."""
        self.names.append(_NamedImport(name, is_type=True))
        return self

    def type_only(self) -> Import:
        """Make this an ``import type`` statement."""
        self.is_type_only = True
        return self

    def _format(self) -> str:
        type_kw = "type " if self.is_type_only else ""
        named = ", ".join(item.render() for item in self.names)
        if self.default_name is not None:
            if self.names:
                return (
                    f'import {type_kw}{self.default_name}, {{ {named} }} '
                    f'from "{self.source}";'
                )
            return f'import {type_kw}{self.default_name} from "{self.source}";'
        if self.names:
            return f'import {type_kw}{{ {named} }} from "{self.source}";'
        return f'import "{self.source}";'

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        return builder.line(self._format())

    def build(self) -> str:
        return self.render(CodeBuilder()).build()

    def to_fragments(self) -> list[Fragment]:
        return [Line(self._format())]