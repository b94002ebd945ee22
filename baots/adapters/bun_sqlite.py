"""Database adapter for Bun's built-in ``bun:sqlite`` module."""

from __future__ import annotations

from baots.ast.imports import Import
from baots.fragments import Fragment, Raw
from baots.type_mapper import DatabaseType


class BunSqliteAdapter:
    """Generates connection code for SQLite using ``bun:sqlite``.

    Bun has native support for SQLite only; other databases map to
    ``unknown`` and produce a comment instead of code.
    """

    name = "bun:sqlite"

    def dependencies(self, db_type: DatabaseType) -> list[tuple[str, str]]:
        """External packages needed; ``bun:sqlite`` is built into Bun."""
        return []

    def pool_type(self, db_type: DatabaseType) -> str:
        if db_type is DatabaseType.SQLITE:
            return "Database"
        return "unknown"

    def requires_async(self, db_type: DatabaseType) -> bool:
        # bun:sqlite is synchronous.
        return False

    def imports(self, db_type: DatabaseType) -> list[Import]:
        if db_type is DatabaseType.SQLITE:
            return [Import("bun:sqlite").named("Database")]
        return []

    def generate_pool_init(
        self,
        field_name: str,
        db_type: DatabaseType,
        env_var: str,
        sqlite_path: str | None = None,
    ) -> list[Fragment]:
        """Code that opens the database into a constant named ``field_name``.

        Without a configured path, the path comes from ``env_var`` and
        falls back to an in-memory database.
        """
        if db_type is not DatabaseType.SQLITE:
            label = db_type.name.capitalize()
            return [Raw(f"// {label} database not yet supported")]
        if sqlite_path is not None:
            db_path = f'"{sqlite_path}"'
        else:
            db_path = f'process.env.{env_var} ?? ":memory:"'
        return [Raw(f"const {field_name} = new Database({db_path});")]

    def generate_options(
        self,
        db_type: DatabaseType,
        read_only: bool | None = None,
        create_if_missing: bool | None = None,
    ) -> list[Fragment] | None:
        """The options object for ``new Database``, or None if none apply."""
        if db_type is not DatabaseType.SQLITE:
            return None
        opts = []
        if read_only is True:
            opts.append("readonly: true")
        if create_if_missing is True:
            opts.append("create: true")
        if not opts:
            return None
        return [Raw(f"{{ {', '.join(opts)} }}")]