"""Generated ``src/commands/<path>.ts`` command definition files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from baots.code_file import CodeFile, RawCode
from baots.files.base import GeneratedFile, Overwrite
from baots.naming import to_kebab_case

GENERATED_HEADER = "// Generated by Bao - DO NOT EDIT"


@dataclass
class CommandTs(GeneratedFile):
    """A command file at a possibly nested path such as ``data/builders``."""

    path_segments: list[str]
    content: str

    overwrite = Overwrite.ALWAYS
    header = GENERATED_HEADER

    @classmethod
    def single(cls, name: str, content: str) -> CommandTs:
        """A command file at the top level, e.g. ``commands/data.ts``."""
        return cls([name], content)

    def path(self, base: Path) -> Path:
        if not self.path_segments:
            raise ValueError("a command file needs at least one path segment")
        *dirs, last = self.path_segments
        path = Path(base) / "src" / "commands"
        for segment in dirs:
            path /= to_kebab_case(segment)
        return path / f"{to_kebab_case(last)}.ts"

    def render(self) -> str:
        return (
            CodeFile()
            .add(RawCode(GENERATED_HEADER))
            .add(RawCode(self.content))
            .render()
        )