from baots.files.context_ts import GENERATED_HEADER, ContextFieldInfo, ContextTs
from baots.type_mapper import ContextFieldType


def test_path(tmp_path):
    assert ContextTs().path(tmp_path) == tmp_path / "src" / "context.ts"


def test_empty_context():
    code = ContextTs().render()
    assert code.startswith(GENERATED_HEADER)
    assert "export type Context = {};" in code
    assert "bun:sqlite" not in code


def test_sqlite_field_imports_database():
    code = ContextTs([ContextFieldInfo("db", ContextFieldType.SQLITE, "DATABASE_URL")]).render()
    assert 'import { Database } from "bun:sqlite";' in code
    assert "export type Context = {" in code
    assert "  db: Database;" in code
    assert code.rstrip().endswith("};")


def test_other_fields_are_unknown():
    fields = [
        ContextFieldInfo("pg", ContextFieldType.POSTGRES),
        ContextFieldInfo("my", ContextFieldType.MYSQL),
        ContextFieldInfo("http", ContextFieldType.HTTP),
    ]
    code = ContextTs(fields).render()
    assert "import" not in code
    for name in ("pg", "my", "http"):
        assert f"  {name}: unknown;" in code


def test_field_order_preserved():
    fields = [
        ContextFieldInfo("zeta", ContextFieldType.HTTP),
        ContextFieldInfo("alpha", ContextFieldType.SQLITE),
    ]
    code = ContextTs(fields).render()
    assert code.index("zeta:") < code.index("alpha:")


def test_write_round_trip(tmp_path):
    ctx = ContextTs([ContextFieldInfo("db", ContextFieldType.SQLITE)])
    ctx.write(tmp_path)
    assert ctx.path(tmp_path).read_text(encoding="utf-8") == ctx.render()