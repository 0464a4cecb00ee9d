"""Tests for the batch paste-to-records script."""
import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "parse_pastes.py"

@pytest.fixture
def parse_pastes():
    spec = importlib.util.spec_from_file_location("parse_pastes", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def test_undecodable_file_is_skipped(parse_pastes, tmp_path, monkeypatch, capsys):
    teams = tmp_path / "teams"
    teams.mkdir()
    (teams / "a.txt").write_bytes(b"\xff\xfe\xfa")
    (teams / "b.txt").write_text("Ditto\n- Transform\n")
    (teams / "c.txt").write_text("   \n")
    output = tmp_path / "records.jsonl"

    monkeypatch.setattr(sys, "argv", ["parse_pastes.py", str(teams), "--output", str(output)])
    parse_pastes.main()

    records = [json.loads(line) for line in output.read_text().splitlines()]
    assert len(records) == 1
    assert records[0]["team_name"] == "b"
    assert records[0]["key_pokemon"] == ["Ditto"]
    out = capsys.readouterr().out
    assert "Wrote 1 records" in out
    assert "2 skipped" in out

def test_missing_directory_exits(parse_pastes, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["parse_pastes.py", str(tmp_path / "missing")])
    with pytest.raises(SystemExit):
        parse_pastes.main()
