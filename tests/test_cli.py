# tests/test_cli.py

from __future__ import annotations

import json

import pytest

from cli.main import main


@pytest.fixture(autouse=True)
def _no_global_logging(monkeypatch) -> None:
    # keep the root handler from binding to a captured stream
    monkeypatch.setattr("cli.main.setup_logging", lambda: None)


def test_list_prints_categories_and_tasks(capsys) -> None:
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "B. Descriptive Analytics" in out
    assert "[  8] Calculate volatility per script" in out


def test_export_writes_notebook(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr("analytics.delivery._clipboard_command", lambda: None)

    assert main(["26", "--out", str(tmp_path), "--no-browser"]) == 0

    path = tmp_path / "Calculate_RSI_indicator.ipynb"
    assert path.is_file()
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["metadata"]["kernelspec"]["name"] == "python3"
    assert str(path) in capsys.readouterr().out


def test_unknown_task_id(tmp_path) -> None:
    assert main(["3", "--out", str(tmp_path), "--no-browser"]) == 1


def test_missing_task_id_prints_usage(capsys) -> None:
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err
