"""Base class for generated project files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class Overwrite(Enum):
    """When an existing file may be replaced."""

    ALWAYS = "always"
    IF_MISSING = "if_missing"


class WriteResult(Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


class GeneratedFile(ABC):
    """A file with a fixed location and content under a project directory."""

    overwrite: Overwrite = Overwrite.ALWAYS

    @abstractmethod
    def path(self, base: Path) -> Path:
        """Where the file lives under ``base``."""

    @abstractmethod
    def render(self) -> str:
        """The file's content."""

    def write(self, base: str | Path) -> WriteResult:
        """Write the file under ``base`` unless its rules say to keep an existing one."""
        target = Path(self.path(Path(base)))
        if self.overwrite is Overwrite.IF_MISSING and target.exists():
            return WriteResult.SKIPPED
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(), encoding="utf-8")
        return WriteResult.WRITTEN