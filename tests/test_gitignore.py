from baots.files.base import WriteResult
from baots.files.gitignore import GitIgnore


def test_path(tmp_path):
    assert GitIgnore().path(tmp_path) == tmp_path / ".gitignore"


def test_content_entries():
    lines = GitIgnore().render().splitlines()
    for entry in ("node_modules/", "dist/", "bun.lockb", ".env", ".DS_Store", "*.log"):
        assert entry in lines


def test_ends_with_newline():
    assert GitIgnore().render().endswith("*.log\n")


def test_existing_file_is_kept(tmp_path):
    target = tmp_path / ".gitignore"
    target.write_text("custom\n", encoding="utf-8")
    assert GitIgnore().write(tmp_path) is WriteResult.SKIPPED
    assert target.read_text(encoding="utf-8") == "custom\n"


def test_missing_file_is_written(tmp_path):
    assert GitIgnore().write(tmp_path) is WriteResult.WRITTEN
    assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == GitIgnore().render()