"""The ``tsconfig.json`` file for a Bun project."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from baots.files.base import GeneratedFile, Overwrite

_SETTINGS: dict[str, Any] = {
    "compilerOptions": {
        "lib": ["ESNext"],
        "target": "ESNext",
        "module": "ESNext",
        "moduleDetection": "force",
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "verbatimModuleSyntax": True,
        "noEmit": True,
        "strict": True,
        "skipLibCheck": True,
        "noFallthroughCasesInSwitch": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noPropertyAccessFromIndexSignature": True,
        "resolveJsonModule": True,
        "esModuleInterop": True,
    },
    "include": ["src/**/*.ts"],
}


def _dump(value: Any, depth: int = 0) -> str:
    """Serialise with objects expanded over lines and arrays kept inline."""
    if not isinstance(value, dict):
        return json.dumps(value)
    pad = "  " * (depth + 1)
    items = ",\n".join(
        f"{pad}{json.dumps(key)}: {_dump(item, depth + 1)}" for key, item in value.items()
    )
    return "{\n" + items + "\n" + "  " * depth + "}"


class TsConfig(GeneratedFile):
    """Strict TypeScript compiler settings for Bun."""

    overwrite = Overwrite.IF_MISSING

    def path(self, base: Path) -> Path:
        return Path(base) / "tsconfig.json"

    def render(self) -> str:
        return _dump(_SETTINGS) + "\n"