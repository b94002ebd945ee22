"""The ``.gitignore`` file for a Bun project."""

from __future__ import annotations

from pathlib import Path

from baots.files.base import GeneratedFile, Overwrite

_CONTENT = """\
# Dependencies
node_modules/

# Build output
dist/

# Bun
bun.lockb

# Environment
.env
.env.local
.env.*.local

# IDE
.idea/
.vscode/
*.swp
*.swo

# OS
.DS_Store
Thumbs.db

# Debug
*.log
"""


class GitIgnore(GeneratedFile):
    """Ignore rules for dependencies, build output and editor files."""

    overwrite = Overwrite.IF_MISSING

    def path(self, base: Path) -> Path:
        return Path(base) / ".gitignore"

    def render(self) -> str:
        return _CONTENT