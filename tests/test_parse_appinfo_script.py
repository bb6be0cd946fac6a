"""Tests for the parse_appinfo.py dump script."""
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from parse_appinfo import dump_appinfo
from vdf_builders import app, branch_entry, document, string_entry


def _write_appinfo(tmp_path):
    path = tmp_path / "appinfo.vdf"
    path.write_bytes(document(
        app(440, branch_entry("common", string_entry("name", "Team Fortress 2"), string_entry("type", "Game"))),
    ))
    return path


def test_summary(tmp_path, capsys):
    status = dump_appinfo(str(_write_appinfo(tmp_path)))
    out = capsys.readouterr().out
    assert status == 0
    assert "Parsed 1 apps" in out
    assert "Team Fortress 2 (Game)" in out


def test_dump_selected_app(tmp_path, capsys):
    status = dump_appinfo(str(_write_appinfo(tmp_path)), [440])
    out = capsys.readouterr().out
    assert status == 0
    dumped = json.loads(out[out.index("{"):])
    assert dumped == {"440": {"common": {"name": "Team Fortress 2", "type": "Game"}}}


def test_unknown_app(tmp_path, capsys):
    assert dump_appinfo(str(_write_appinfo(tmp_path)), [1]) == 1
    assert "App 1 not found" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert dump_appinfo(str(tmp_path / "missing.vdf")) == 1
    assert "Error parsing appinfo" in capsys.readouterr().out
