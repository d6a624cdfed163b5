"""Integration tests for CLI flows across the tools."""

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from filetasks import funko_cli, json_to_csv, log_counter

pytestmark = pytest.mark.integration


def test_collection_export_to_csv(tmp_path, monkeypatch, capsys):
    """Funkos added via the CLI convert to one CSV row each."""
    monkeypatch.setenv("FUNKO_DATA_DIR", str(tmp_path / "funkos"))
    for funko_id, name, value in (("1", "Sonic", "15"), ("2", "Tails", "8.5")):
        code = funko_cli.main(
            [
                "add", "--user", "alice", "--id", funko_id,
                "--name", name,
                "--description", "Figure",
                "--type", "Pop!",
                "--genre", "Videojuegos",
                "--franchise", "Sonic the Hedgehog",
                "--number", funko_id,
                "--exclusive", "true",
                "--features", "None",
                "--value", value,
            ]
        )
        assert code == 0

    items = [
        json.loads(path.read_text(encoding="utf-8"))
        for path in sorted((tmp_path / "funkos" / "alice").glob("*.json"))
    ]
    items[1]["signed"] = True
    src = tmp_path / "alice.json"
    src.write_text(json.dumps(items), encoding="utf-8")
    dest = tmp_path / "alice.csv"

    assert json_to_csv.main([str(src), str(dest)]) == 0
    lines = dest.read_text(encoding="utf-8").splitlines()
    assert lines[0] == (
        "id,name,description,type,genre,franchise,number,exclusive,"
        "special_features,market_value,signed"
    )
    assert lines[1] == "1,Sonic,Figure,Pop!,Videojuegos,Sonic the Hedgehog,1,true,None,15,"
    assert lines[2] == "2,Tails,Figure,Pop!,Videojuegos,Sonic the Hedgehog,2,true,None,8.5,true"
    assert json_to_csv.SUCCESS_MESSAGE in capsys.readouterr().out


def test_convert_failure_then_log_count(tmp_path, capsys):
    """A failed conversion leaves no output; counting a log still works."""
    src = tmp_path / "empty.json"
    src.write_text("[]", encoding="utf-8")
    dest = tmp_path / "out.csv"
    assert json_to_csv.main([str(src), str(dest)]) == 1
    assert not dest.exists()

    log_path = tmp_path / "run.log"
    log_path.write_text("INFO start\nERROR convert failed\nINFO done\n", encoding="utf-8")
    assert log_counter.main([str(log_path), "info"]) == 0
    out = capsys.readouterr().out
    assert json_to_csv.FAILURE_MESSAGE in out
    assert 'Occurrences of "INFO": 2' in out
