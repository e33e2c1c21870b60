from __future__ import annotations

import pytest

from guitar_api.domain.guitars import (
    field_updates,
    is_blank,
    missing_fields,
    normalize_loaded,
    parse_guitar_id,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        ("007", 7),
        (" 5", 5),
        ("-3", -3),
        ("3abc", 3),
        ("1.9", 1),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_guitar_id(raw, expected):
    assert parse_guitar_id(raw) == expected


def test_is_blank_follows_falsy_values():
    for value in (None, False, "", 0, 0.0):
        assert is_blank(value)
    for value in ("x", 1, True, [], {}):
        assert not is_blank(value)


def test_missing_fields():
    assert missing_fields({"name": "Incomplete Guitar"}) == ["neck", "neckLength", "body", "pickups"]
    assert missing_fields(None) == ["name", "neck", "neckLength", "body", "pickups"]
    full = {"name": "a", "neck": "b", "neckLength": "c", "body": "d", "pickups": "e"}
    assert missing_fields(full) == []


def test_field_updates_keeps_only_domain_fields():
    payload = {"id": 10, "pickups": None, "color": "red", "name": "N"}
    assert field_updates(payload) == {"pickups": None, "name": "N"}
    assert field_updates(["pickups"]) == {}


def test_normalize_loaded_overrides_stored_id():
    record = normalize_loaded(3, {"id": 99, "name": "X", "neckLength": ""})
    assert record == {"id": 3, "name": "X", "neckLength": None}


@pytest.mark.parametrize("value", [[], {}, "24\"", 25.5])
def test_normalize_loaded_keeps_present_neck_length(value):
    assert normalize_loaded(1, {"neckLength": value})["neckLength"] == value


@pytest.mark.parametrize("value", [None, False, 0, ""])
def test_normalize_loaded_blanks_falsy_neck_length(value):
    assert normalize_loaded(1, {"neckLength": value})["neckLength"] is None
