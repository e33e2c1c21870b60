"""
Smoke tests for scripts/normalize_data.py.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

import normalize_data  # noqa: E402
from guitar_api.repositories import json_storage  # noqa: E402
from guitar_api.repositories.json_storage import StorageError  # noqa: E402


def test_rewrites_file_in_canonical_form(tmp_path, capsys):
    path = tmp_path / "guitars.json"
    path.write_text(json.dumps([{"id": 5, "name": "A", "neckLength": '25.5"'}]), encoding="utf-8")

    normalize_data.main(["--file", str(path)])

    assert "OK: 1 guitars" in capsys.readouterr().out
    raw = path.read_text(encoding="utf-8")
    assert raw.startswith("[\n  {")
    assert json.loads(raw) == [{"name": "A", "neckLength": '25.5"'}]


def test_check_only_leaves_file_alone(tmp_path):
    path = tmp_path / "guitars.json"
    original = json.dumps([{"id": 5, "name": "A"}])
    path.write_text(original, encoding="utf-8")

    normalize_data.main(["--file", str(path), "--check"])

    assert path.read_text(encoding="utf-8") == original


def test_invalid_file_raises(tmp_path):
    path = tmp_path / "guitars.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(Exception):
        normalize_data.main(["--file", str(path), "--check"])


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit):
        normalize_data.main(["--file", str(tmp_path / "nope.json")])


def test_failed_rewrite_raises_instead_of_reporting_ok(tmp_path, monkeypatch, capsys):
    def boom(path, items):
        raise StorageError("disk full", path)

    monkeypatch.setattr(json_storage, "save", boom)
    path = tmp_path / "guitars.json"
    original = json.dumps([{"id": 5, "name": "A"}])
    path.write_text(original, encoding="utf-8")

    with pytest.raises(StorageError):
        normalize_data.main(["--file", str(path)])

    assert "OK" not in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == original
