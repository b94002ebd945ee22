"""Mapping of argument and context types to TypeScript types."""

from __future__ import annotations

from enum import Enum


class ArgType(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    PATH = "path"


class DatabaseType(Enum):
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


class ContextFieldType(Enum):
    """Kind of a shared context field: a database connection or an HTTP client."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    HTTP = "http"

    @property
    def database(self) -> DatabaseType | None:
        """The database type, or None for an HTTP client."""
        if self is ContextFieldType.HTTP:
            return None
        return DatabaseType(self.value)


_ARG_TYPES = {
    ArgType.STRING: "string",
    ArgType.INT: "number",
    ArgType.FLOAT: "number",
    ArgType.BOOL: "boolean",
    ArgType.PATH: "string",
}


class TypeScriptTypeMapper:
    """Maps manifest types to TypeScript type names."""

    def language(self) -> str:
        return "typescript"

    def map_arg_type(self, arg_type: ArgType) -> str:
        return _ARG_TYPES[arg_type]

    def map_optional_arg_type(self, arg_type: ArgType) -> str:
        return f"{self.map_arg_type(arg_type)} | undefined"

    def map_context_type(self, field_type: ContextFieldType) -> str:
        # Only SQLite has a native type under Bun.
        if field_type is ContextFieldType.SQLITE:
            return "Database"
        return "unknown"