"""The ``src/cli.ts`` file that wires all top-level commands into boune."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from baots.ast.consts import Const
from baots.ast.imports import Import
from baots.code_file import CodeFile, RawCode
from baots.files.base import GeneratedFile, Overwrite
from baots.naming import to_camel_case, to_kebab_case

GENERATED_HEADER = "// Generated by Bao - DO NOT EDIT"


@dataclass
class CommandInfo:
    """A top-level command as seen by the CLI entry file."""

    name: str
    description: str = ""
    has_subcommands: bool = False


@dataclass
class CliTs(GeneratedFile):
    """Main CLI setup built with ``defineCli``."""

    name: str
    version: str = "0.1.0"
    description: str | None = None
    commands: list[CommandInfo] = field(default_factory=list)

    overwrite = Overwrite.ALWAYS
    header = GENERATED_HEADER

    def _imports(self) -> list[Import]:
        imports = [Import("boune").named("defineCli")]
        for cmd in self.commands:
            camel = to_camel_case(cmd.name)
            kebab = to_kebab_case(cmd.name)
            imports.append(
                Import(f"./commands/{kebab}.ts").named(f"{camel}Command")
            )
        return imports

    def _schema(self) -> str:
        lines = [
            "defineCli({",
            f'  name: "{self.name}",',
            f'  version: "{self.version}",',
        ]
        if self.description is not None:
            lines.append(f'  description: "{self.description}",')
        lines.append("  commands: {")
        for cmd in self.commands:
            camel = to_camel_case(cmd.name)
            lines.append(f"    {camel}: {camel}Command,")
        lines.append("  },")
        lines.append("})")
        return "\n".join(lines)

    def path(self, base: Path) -> Path:
        return Path(base) / "src" / "cli.ts"

    def render(self) -> str:
        return (
            CodeFile()
            .add(RawCode(GENERATED_HEADER))
            .imports(self._imports())
            .add(Const("app", self._schema()))
            .render()
        )