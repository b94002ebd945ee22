import json

from baots.files.base import WriteResult
from baots.files.tsconfig import TsConfig


def test_render_is_valid_json():
    data = json.loads(TsConfig().render())
    assert data["include"] == ["src/**/*.ts"]


def test_compiler_options():
    options = json.loads(TsConfig().render())["compilerOptions"]
    assert options["lib"] == ["ESNext"]
    assert options["moduleResolution"] == "bundler"
    assert options["strict"] is True
    assert options["noEmit"] is True
    assert options["allowImportingTsExtensions"] is True


def test_render_ends_with_newline():
    assert TsConfig().render().endswith("}\n")


def test_path(tmp_path):
    assert TsConfig().path(tmp_path) == tmp_path / "tsconfig.json"


def test_write_keeps_existing_file(tmp_path):
    target = tmp_path / "tsconfig.json"
    target.write_text("{}", encoding="utf-8")
    assert TsConfig().write(tmp_path) is WriteResult.SKIPPED
    assert target.read_text(encoding="utf-8") == "{}"


def test_write_creates_file(tmp_path):
    assert TsConfig().write(tmp_path) is WriteResult.WRITTEN
    assert (tmp_path / "tsconfig.json").read_text(encoding="utf-8") == TsConfig().render()