"""The ``src/context.ts`` file describing shared application state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from baots.ast.imports import Import
from baots.ast.types import Field, ObjectType
from baots.code_file import CodeFile, RawCode
from baots.files.base import GeneratedFile, Overwrite
from baots.type_mapper import ContextFieldType, TypeScriptTypeMapper

GENERATED_HEADER = "// Generated by Bao - DO NOT EDIT"

_MAPPER = TypeScriptTypeMapper()


@dataclass
class ContextFieldInfo:
    """One shared resource in the context: a database or an HTTP client."""

    name: str
    field_type: ContextFieldType
    env_var: str = ""
    is_async: bool = False


@dataclass
class ContextTs(GeneratedFile):
    """Declares the ``Context`` type holding every context field."""

    fields: list[ContextFieldInfo] = field(default_factory=list)

    overwrite = Overwrite.ALWAYS
    header = GENERATED_HEADER

    def _needs_sqlite(self) -> bool:
        return any(f.field_type is ContextFieldType.SQLITE for f in self.fields)

    def _imports(self) -> list[Import]:
        if self._needs_sqlite():
            return [Import("bun:sqlite").named("Database")]
        return []

    def _context_type(self) -> ObjectType:
        context = ObjectType("Context")
        for info in self.fields:
            context.field(Field(info.name, _MAPPER.map_context_type(info.field_type)))
        return context

    def path(self, base: Path) -> Path:
        return Path(base) / "src" / "context.ts"

    def render(self) -> str:
        return (
            CodeFile()
            .add(RawCode(GENERATED_HEADER))
            .imports(self._imports())
            .add(self._context_type())
            .render()
        )