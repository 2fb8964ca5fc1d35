from __future__ import annotations

import io
from pathlib import Path

import pytest

from record_checker.cli import main

VALID = '{"id":1,"login":"bob","password":"x","info":[]}'


def test_main_file_input_prints_results(tmp_path: Path, capsys, write_records) -> None:
    records = tmp_path / "records.jsonl"
    write_records(records, [VALID, '{"id":"1","login":"bob"}'])
    log_dir = tmp_path / "log"

    main([str(records), "--log-dir", str(log_dir), "--print-results"])

    assert capsys.readouterr().out.splitlines() == ["NONE", "ID_NOT_INTEGER"]
    checker = (log_dir / "checker.log").read_text(encoding="utf-8")
    assert "Logger set up" in checker
    assert "Checked 2 records" in checker
    assert (log_dir / "access.log").read_text(encoding="utf-8").rstrip().endswith(VALID)


def test_main_not_json_exits_non_zero(tmp_path: Path, capsys, write_records) -> None:
    records = tmp_path / "records.jsonl"
    write_records(records, ["not json at all", VALID])
    log_dir = tmp_path / "log"

    with pytest.raises(SystemExit) as excinfo:
        main([str(records), "--log-dir", str(log_dir), "--print-results"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "not json at all" in captured.err
    assert captured.out == ""
    assert not (log_dir / "access.log").read_text(encoding="utf-8")


def test_main_logging_setup_failure_exits(tmp_path: Path, write_records) -> None:
    records = tmp_path / "records.jsonl"
    write_records(records, [VALID])
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(records), "--log-dir", str(blocker / "log")])

    assert excinfo.value.code == 1


def test_main_invalid_env_exits_with_usage_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    monkeypatch.setenv("RECORD_CHECKER_PROMPT_DELAY", "later")

    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "records.jsonl")])

    assert excinfo.value.code == 2
    assert "RECORD_CHECKER_PROMPT_DELAY" in capsys.readouterr().err


def test_main_falls_back_to_interactive(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    monkeypatch.setenv("RECORD_CHECKER_LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr("sys.stdin", io.StringIO(VALID + "\n"))

    main([str(tmp_path / "missing.jsonl"), "--prompt-delay", "0", "--print-results"])

    out = capsys.readouterr().out
    assert out == "Input: Input: NONE\n"
    assert "Read from stdin" in (tmp_path / "log" / "checker.log").read_text(encoding="utf-8")
