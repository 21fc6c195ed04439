"""Tests for the finder command line."""

import json
import sys

import pytest

import finder


@pytest.fixture
def catalog_file(tmp_path, catalog):
    path = tmp_path / "voices.json"
    path.write_text(json.dumps({"voices": [v.to_dict() for v in catalog]}), encoding="utf-8")
    return path


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["finder.py", *args])
    finder.main()


def test_prints_ranked_matches(monkeypatch, capsys, catalog_file):
    _run(monkeypatch, "young British male", "--catalog", str(catalog_file))
    out = capsys.readouterr().out
    assert "Design: young adult male voice, British accent" in out
    assert "1. Oliver [British / male / young] score=70" in out
    assert "bonus 10" in out


def test_no_matches_message(monkeypatch, capsys, catalog_file):
    _run(monkeypatch, "French woman", "--catalog", str(catalog_file))
    assert "No good matches." in capsys.readouterr().out


def test_json_without_catalog(monkeypatch, capsys):
    _run(monkeypatch, "young British male", "--json")
    data = json.loads(capsys.readouterr().out)
    assert data["attributes"] == {"accent": "British", "ageGroup": "young", "gender": "male"}
    assert data["design"]["age"] == "young adult"


def test_unreadable_catalog_exits(monkeypatch, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "anyone", "--catalog", str(tmp_path / "missing.json"))
    assert exc.value.code == 1
