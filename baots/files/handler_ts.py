"""Handler stub files that users fill in with command logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from baots.ast.fns import Fn, Param
from baots.ast.imports import Import
from baots.code_file import CodeFile
from baots.files.base import GeneratedFile, Overwrite
from baots.naming import to_kebab_case, to_pascal_case

_LOG_LINES = {
    (True, True): "console.log(args, options);",
    (True, False): "console.log(args);",
    (False, True): "console.log(options);",
    (False, False): "// no args or options",
}


@dataclass
class HandlerTs(GeneratedFile):
    """A stub ``run`` function for one leaf command.

    Without explicit path segments the handler sits at the top level.
    """

    command: str
    path_segments: list[str] = field(default_factory=list)
    has_args: bool = True
    has_options: bool = False

    overwrite = Overwrite.IF_MISSING

    def __post_init__(self) -> None:
        if not self.path_segments:
            self.path_segments = [self.command]

    @classmethod
    def nested(
        cls,
        command: str,
        path_segments: list[str],
        has_args: bool,
        has_options: bool,
    ) -> HandlerTs:
        """A handler for a command at a nested path."""
        return cls(command, list(path_segments), has_args, has_options)

    def _import(self) -> Import:
        pascal = to_pascal_case(self.command)
        command_path = "/".join(to_kebab_case(s) for s in self.path_segments)
        up_path = "../" * len(self.path_segments)
        import_ = Import(f"{up_path}commands/{command_path}.ts")
        if self.has_args:
            import_.named_type(f"{pascal}Args")
        if self.has_options:
            import_.named_type(f"{pascal}Options")
        return import_

    def _handler(self) -> Fn:
        pascal = to_pascal_case(self.command)
        handler = Fn("run").async_()
        if self.has_args:
            handler.param(Param("args", f"{pascal}Args"))
        if self.has_options:
            handler.param(Param("options", f"{pascal}Options"))
        return (
            handler.returns("Promise<void>")
            .body_line(f"// Implement the {self.command} command here")
            .body_line(_LOG_LINES[(bool(self.has_args), bool(self.has_options))])
        )

    def path(self, base: Path) -> Path:
        return Path(base) / f"{to_kebab_case(self.command)}.ts"

    def render(self) -> str:
        return CodeFile().import_(self._import()).add(self._handler()).render()