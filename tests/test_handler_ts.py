from baots.files.base import WriteResult
from baots.files.handler_ts import HandlerTs


def test_defaults_match_top_level_with_args():
    handler = HandlerTs("hello")
    assert handler.path_segments == ["hello"]
    assert handler.has_args is True
    assert handler.has_options is False


def test_path_is_kebab_case(tmp_path):
    assert HandlerTs("get_user").path(tmp_path) == tmp_path / "get-user.ts"


def test_render_with_args():
    code = HandlerTs("hello").render()
    assert 'import { type HelloArgs } from "../commands/hello.ts";' in code
    assert "export async function run(args: HelloArgs): Promise<void> {" in code
    assert "  console.log(args);" in code
    assert code.endswith("}\n")


def test_render_nested_with_args_and_options():
    handler = HandlerTs.nested("leaderboard", ["data", "builders", "leaderboard"], True, True)
    code = handler.render()
    assert '"../../../commands/data/builders/leaderboard.ts"' in code
    assert "{ type LeaderboardArgs, type LeaderboardOptions }" in code
    assert "run(args: LeaderboardArgs, options: LeaderboardOptions)" in code
    assert "console.log(args, options);" in code


def test_render_options_only():
    code = HandlerTs.nested("sync", ["sync"], False, True).render()
    assert "type SyncArgs" not in code
    assert "run(options: SyncOptions)" in code
    assert "console.log(options);" in code


def test_render_without_args_or_options():
    code = HandlerTs.nested("ping", ["ping"], False, False).render()
    assert 'import "../commands/ping.ts";' in code
    assert "export async function run(): Promise<void> {" in code
    assert "// no args or options" in code


def test_existing_handler_is_kept(tmp_path):
    handler = HandlerTs("hello")
    assert handler.write(tmp_path) is WriteResult.WRITTEN
    target = handler.path(tmp_path)
    target.write_text("user code", encoding="utf-8")
    assert handler.write(tmp_path) is WriteResult.SKIPPED
    assert target.read_text(encoding="utf-8") == "user code"