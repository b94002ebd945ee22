import pytest

from baots.adapters.bun_sqlite import BunSqliteAdapter
from baots.fragments import CodeBuilder, Raw
from baots.type_mapper import DatabaseType


@pytest.fixture
def adapter():
    return BunSqliteAdapter()


def test_name(adapter):
    assert adapter.name == "bun:sqlite"


@pytest.mark.parametrize(
    "db_type, expected",
    [
        (DatabaseType.SQLITE, "Database"),
        (DatabaseType.POSTGRES, "unknown"),
        (DatabaseType.MYSQL, "unknown"),
    ],
)
def test_pool_type(adapter, db_type, expected):
    assert adapter.pool_type(db_type) == expected


@pytest.mark.parametrize("db_type", list(DatabaseType))
def test_never_async_and_no_dependencies(adapter, db_type):
    assert adapter.requires_async(db_type) is False
    assert adapter.dependencies(db_type) == []


def test_sqlite_imports(adapter):
    imports = adapter.imports(DatabaseType.SQLITE)
    assert len(imports) == 1
    assert imports[0].build() == 'import { Database } from "bun:sqlite";\n'


def test_other_imports_empty(adapter):
    assert adapter.imports(DatabaseType.POSTGRES) == []
    assert adapter.imports(DatabaseType.MYSQL) == []


def test_pool_init_with_path(adapter):
    fragments = adapter.generate_pool_init("db", DatabaseType.SQLITE, "DB_URL", "app.db")
    assert fragments == [Raw('const db = new Database("app.db");')]


def test_pool_init_from_env(adapter):
    fragments = adapter.generate_pool_init("db", DatabaseType.SQLITE, "DB_URL")
    assert fragments == [Raw('const db = new Database(process.env.DB_URL ?? ":memory:");')]


def test_pool_init_unsupported(adapter):
    fragments = adapter.generate_pool_init("db", DatabaseType.POSTGRES, "DB_URL")
    assert len(fragments) == 1
    text = CodeBuilder().apply_fragment(fragments[0]).build()
    assert text.startswith("//")
    assert "Postgres" in text
    assert "Database(" not in text


def test_options_both(adapter):
    result = adapter.generate_options(DatabaseType.SQLITE, True, True)
    assert result == [Raw("{ readonly: true, create: true }")]


def test_options_read_only(adapter):
    result = adapter.generate_options(DatabaseType.SQLITE, read_only=True)
    assert result == [Raw("{ readonly: true }")]


def test_options_create(adapter):
    result = adapter.generate_options(DatabaseType.SQLITE, create_if_missing=True)
    assert result == [Raw("{ create: true }")]


def test_options_none_when_false_or_missing(adapter):
    assert adapter.generate_options(DatabaseType.SQLITE) is None
    assert adapter.generate_options(DatabaseType.SQLITE, False, False) is None


def test_options_none_for_other_databases(adapter):
    assert adapter.generate_options(DatabaseType.MYSQL, True, True) is None