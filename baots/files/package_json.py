"""The ``package.json`` file for a Bun project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Tuple, Union

from baots.files.base import GeneratedFile, Overwrite

DEFAULT_DESCRIPTION = "A CLI application"
DEFAULT_VERSION = "0.1.0"


@dataclass(frozen=True)
class Dependency:
    """A package name with its version requirement."""

    name: str
    version: str


DependencyLike = Union[Dependency, Tuple[str, str]]


def _as_dependency(dep: DependencyLike) -> Dependency:
    if isinstance(dep, Dependency):
        return dep
    name, version = dep
    return Dependency(name, version)


def _default_dependencies() -> list[Dependency]:
    return [Dependency("boune", "^0.5.0")]


def _default_dev_dependencies() -> list[Dependency]:
    return [
        Dependency("@types/bun", "latest"),
        Dependency("typescript", "^5.0.0"),
    ]


def _render_dependencies(deps: Iterable[Dependency]) -> str:
    return ",\n".join(f'    "{d.name}": "{d.version}"' for d in deps)


@dataclass
class PackageJson(GeneratedFile):
    """Project manifest with scripts and dependencies."""

    name: str
    version: str = DEFAULT_VERSION
    description: str = DEFAULT_DESCRIPTION
    dependencies: list[Dependency] = field(default_factory=_default_dependencies)
    dev_dependencies: list[Dependency] = field(
        default_factory=_default_dev_dependencies
    )

    overwrite = Overwrite.IF_MISSING

    def with_version(self, version: object) -> PackageJson:
        self.version = str(version)
        return self

    def with_description(self, description: str) -> PackageJson:
        self.description = description
        return self

    def with_dependency(self, dep: DependencyLike) -> PackageJson:
        """Add a runtime dependency, given as a Dependency or a (name, version) pair."""
        self.dependencies.append(_as_dependency(dep))
        return self

    def with_dependencies(self, deps: Iterable[DependencyLike]) -> PackageJson:
        self.dependencies.extend(_as_dependency(d) for d in deps)
        return self

    def with_dev_dependency(self, dep: DependencyLike) -> PackageJson:
        """Add a development dependency."""
        self.dev_dependencies.append(_as_dependency(dep))
        return self

    def with_dev_dependencies(self, deps: Iterable[DependencyLike]) -> PackageJson:
        self.dev_dependencies.extend(_as_dependency(d) for d in deps)
        return self

    def path(self, base: Path) -> Path:
        return Path(base) / "package.json"

    def render(self) -> str:
        dependencies = _render_dependencies(self.dependencies)
        dev_dependencies = _render_dependencies(self.dev_dependencies)
        return (
            "{\n"
            f'  "name": "{self.name}",\n'
            f'  "version": "{self.version}",\n'
            f'  "description": "{self.description}",\n'
            '  "type": "module",\n'
            '  "scripts": {\n'
            '    "dev": "bun run src/index.ts",\n'
            '    "build": "bun build src/index.ts --outdir dist --target bun",\n'
            '    "start": "bun run dist/index.js"\n'
            "  },\n"
            '  "dependencies": {\n'
            f"{dependencies}\n"
            "  },\n"
            '  "devDependencies": {\n'
            f"{dev_dependencies}\n"
            "  }\n"
            "}\n"
        )