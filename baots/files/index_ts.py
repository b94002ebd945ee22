"""The ``src/index.ts`` entry point."""

from __future__ import annotations

from pathlib import Path

from baots.ast.imports import Import
from baots.code_file import CodeFile, RawCode
from baots.files.base import GeneratedFile, Overwrite


class IndexTs(GeneratedFile):
    """Entry point that starts the CLI application."""

    overwrite = Overwrite.IF_MISSING

    def path(self, base: Path) -> Path:
        return Path(base) / "src" / "index.ts"

    def render(self) -> str:
        return (
            CodeFile()
            .add(RawCode("#!/usr/bin/env bun"))
            .import_(Import("./cli.ts").named("app"))
            .add(RawCode("app.run();"))
            .render()
        )