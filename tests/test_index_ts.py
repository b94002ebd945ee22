from baots.files.base import WriteResult
from baots.files.index_ts import IndexTs


def test_path(tmp_path):
    assert IndexTs().path(tmp_path) == tmp_path / "src" / "index.ts"


def test_render_contents():
    code = IndexTs().render()
    assert 'import { app } from "./cli.ts";' in code
    assert "#!/usr/bin/env bun" in code
    assert code.endswith("app.run();\n")


def test_body_order():
    code = IndexTs().render()
    assert code.index("#!/usr/bin/env bun") < code.index("app.run();")


def test_written_once(tmp_path):
    index = IndexTs()
    assert index.write(tmp_path) is WriteResult.WRITTEN
    assert index.path(tmp_path).read_text(encoding="utf-8") == index.render()
    assert index.write(tmp_path) is WriteResult.SKIPPED