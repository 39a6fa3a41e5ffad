"""Tests for the command-line runner."""

import json

import pytest

from monument.__main__ import main


def test_walk_to_about(capsys):
    assert main(["--to", "about"]) == 0
    out = capsys.readouterr().out
    assert "about-dest" in out
    assert "section=about" in out


def test_teleport_when_no_path(capsys):
    assert main(["--to", "arts", "--rotation", "180"]) == 0
    out = capsys.readouterr().out
    assert "No walk needed or no path at 180°" in out
    assert "node=arts-door" in out


def test_rotation_is_snapped(capsys):
    assert main(["--to", "projects", "--rotation", "100"]) == 0
    out = capsys.readouterr().out
    assert "lstair-x1" in out


def test_gives_up_after_max_time(capsys):
    assert main(["--to", "about", "--max-time", "0.1"]) == 2


def test_settings_file(tmp_path, capsys):
    path = tmp_path / "navigation.json"
    path.write_text(json.dumps({"walk_speed": 10.0}), encoding="utf-8")
    assert main(["--to", "about", "--settings", str(path)]) == 0


def test_missing_settings_file(tmp_path, capsys):
    assert main(["--to", "about", "--settings", str(tmp_path / "nope.json")]) == 1


def test_bad_dt(capsys):
    assert main(["--to", "about", "--dt", "0"]) == 1


def test_unknown_section_rejected():
    with pytest.raises(SystemExit):
        main(["--to", "gallery"])
