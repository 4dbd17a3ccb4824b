"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from autopass.cli.main import build_parser, main
from autopass.exceptions import StoreAccessError
from autopass.store import PassStore


@pytest.fixture()
def config_file(tmp_path: Path, password_store: Path) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(f"password_store: {password_store}\nbrowser: testbrowser\n", encoding="utf-8")
    return path


def test_build_parser_accepts_match_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(["match", str(tmp_path / "x.gpg"), "--title", "Inbox"])

    assert args.command == "match"
    assert args.entry == tmp_path / "x.gpg"
    assert args.title == "Inbox"


def test_show_json_prints_snapshot(
    config_file: Path, write_entry: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_entry("web/x")
    with patch.object(PassStore, "show", return_value="secret\nurl: x.test\n"):
        exit_code = main(["-c", str(config_file), "show", str(path), "--json"])

    assert exit_code == 0
    snapshot = json.loads(capsys.readouterr().out)
    assert snapshot["name"] == "web/x"
    assert snapshot["user_attributes"]["url"] == "x.test"


def test_show_hides_secret(
    config_file: Path, write_entry: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_entry("web/x")
    with patch.object(PassStore, "show", return_value="hunter2\nurl: x.test\n"):
        exit_code = main(["-c", str(config_file), "show", str(path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "url: x.test" in out
    assert "hunter2" not in out


def test_match_exit_codes(config_file: Path, write_entry: Callable[..., Path]) -> None:
    path = write_entry("web/x")
    with patch.object(PassStore, "show", return_value="secret\nurl: x.test\n"):
        assert main(["-c", str(config_file), "match", str(path), "-t", "X.test - Browser"]) == 0
        assert main(["-c", str(config_file), "match", str(path), "-t", "Terminal"]) == 1


def test_open_launches_configured_browser(
    config_file: Path, write_entry: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("BROWSER", raising=False)
    path = write_entry("web/x")
    with (
        patch.object(PassStore, "show", return_value="secret\nurl: http://x.test\n"),
        patch("autopass.launcher.subprocess.Popen") as popen,
    ):
        exit_code = main(["-c", str(config_file), "open", str(path)])

    assert exit_code == 0
    assert popen.call_args.args[0] == ["testbrowser", "http://x.test"]


def test_open_without_url_fails(config_file: Path, write_entry: Callable[..., Path]) -> None:
    path = write_entry("pin")
    with (
        patch.object(PassStore, "show", return_value="1234\n"),
        patch("autopass.launcher.subprocess.Popen") as popen,
    ):
        exit_code = main(["-c", str(config_file), "open", str(path)])

    assert exit_code == 1
    popen.assert_not_called()


def test_store_failure_exit_code(config_file: Path, write_entry: Callable[..., Path]) -> None:
    path = write_entry("web/x")
    with patch.object(PassStore, "show", side_effect=StoreAccessError("gpg failed")):
        assert main(["-c", str(config_file), "show", str(path)]) == 1


def test_config_error_exit_code(tmp_path: Path, write_entry: Callable[..., Path]) -> None:
    bad_config = tmp_path / "bad.yml"
    bad_config.write_text("password_key: []\n", encoding="utf-8")

    assert main(["-c", str(bad_config), "show", str(write_entry("web/x"))]) == 2


def test_entry_outside_store_exit_code(config_file: Path, tmp_path: Path) -> None:
    stray = tmp_path / "stray.gpg"
    stray.write_bytes(b"x")

    assert main(["-c", str(config_file), "show", str(stray)]) == 2


def test_show_cache_records_snapshot(
    config_file: Path, write_entry: Callable[..., Path], tmp_path: Path, password_store: Path
) -> None:
    cache_path = tmp_path / "entries.json"
    config_file.write_text(
        f"password_store: {password_store}\ncache_file: {cache_path}\n",
        encoding="utf-8",
    )
    path = write_entry("web/x")
    with patch.object(PassStore, "show", return_value="secret\nurl: x.test\n"):
        assert main(["-c", str(config_file), "show", str(path), "--cache"]) == 0
        assert main(["-c", str(config_file), "show", str(path), "--cache"]) == 0

    payload = json.loads(cache_path.read_text(encoding="utf-8"))
    assert [snapshot["name"] for snapshot in payload["entries"]] == ["web/x"]
    assert payload["entries"][0]["user_attributes"]["url"] == "x.test"
