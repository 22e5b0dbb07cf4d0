from __future__ import annotations

import json
from pathlib import Path

import pytest

from profstore.cli import main
from profstore.serializers import save_run_json
from profstore.storage import FileRunStore


def _store_with_run(tmp_path: Path) -> FileRunStore:
    store = FileRunStore(tmp_path)
    store.save_run({"main()": {"ct": 1, "wt": 100}}, "profile", "run123")
    return store


def test_cli_list_prints_runs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _store_with_run(tmp_path)
    exit_code = main(["list", "--dir", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "run123" in captured.out
    assert "profile" in captured.out


def test_cli_list_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _store_with_run(tmp_path)
    exit_code = main(["list", "--dir", str(tmp_path), "--html", "--script-name", "/ui"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.startswith("<hr/>Existing dirs:")
    assert 'href="/ui?run=run123&amp;source=profile"' in captured.out


def test_cli_show_prints_description_and_payload(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _store_with_run(tmp_path)
    exit_code = main(["show", "run123", "--type", "memory,profile", "--dir", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "profstore Run (Namespace=memory,profile)" in captured.out
    assert "Run ID: run123" in captured.out
    assert "Entries: 1" in captured.out


def test_cli_show_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _store_with_run(tmp_path)
    exit_code = main(["show", "run123", "--type", "profile", "--dir", str(tmp_path), "--json"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {"main()": {"ct": 1, "wt": 100}}


def test_cli_show_missing_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["show", "ghost", "--type", "profile", "--dir", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Invalid Run Id = ghost" in captured.err


def test_cli_show_corrupt_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "bad.profile.profstore").write_text("not json", encoding="utf-8")
    exit_code = main(["show", "bad", "--type", "profile", "--dir", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Failed to parse run JSON" in captured.err


def test_cli_save_then_load(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run_file = save_run_json({"main()": {"wt": 7}}, tmp_path / "input.json")
    runs_dir = tmp_path / "runs"
    exit_code = main(
        ["save", str(run_file), "--type", "profile", "--run-id", "r1", "--dir", str(runs_dir)]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == "r1"
    assert FileRunStore(runs_dir).get_run("r1", "profile")[0] == {"main()": {"wt": 7}}


def test_cli_save_generates_run_id(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run_file = save_run_json({"main()": {"wt": 7}}, tmp_path / "input.json")
    exit_code = main(["save", str(run_file), "--type", "profile", "--dir", str(tmp_path)])

    run_id = capsys.readouterr().out.strip()
    assert exit_code == 0
    assert (tmp_path / f"{run_id}.profile.profstore").is_file()


def test_cli_save_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["save", str(tmp_path / "nope.json"), "--type", "profile"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "file not found" in captured.err


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit):
        main([])
