"""Domain helpers for guitar records (fields, id parsing, presence checks)."""
from __future__ import annotations

import re
from typing import Any, Mapping

DOMAIN_FIELDS = ("name", "neck", "neckLength", "body", "pickups")
REQUIRED_FIELDS = DOMAIN_FIELDS
ID_FIELD = "id"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_guitar_id(raw: str | None) -> int | None:
    """
    Parse a path segment as a base-10 integer using its leading digits.

    Trailing characters after the digits are ignored ("3abc" -> 3). Returns
    None when there are no leading digits; None never matches a record.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def is_blank(value: Any) -> bool:
    """True for values that do not count as a provided field."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def missing_fields(payload: Mapping[str, Any] | None) -> list[str]:
    data = payload if isinstance(payload, Mapping) else {}
    return [field for field in REQUIRED_FIELDS if is_blank(data.get(field))]


def build_record(guitar_id: int, payload: Mapping[str, Any]) -> dict:
    """New record with the assigned id and the five domain fields only."""
    record: dict[str, Any] = {ID_FIELD: guitar_id}
    for field in DOMAIN_FIELDS:
        record[field] = payload[field]
    return record


def field_updates(payload: Mapping[str, Any] | None) -> dict:
    """Domain fields present in an update body; id and unknown keys are dropped."""
    if not isinstance(payload, Mapping):
        return {}
    return {field: payload[field] for field in DOMAIN_FIELDS if field in payload}


def normalize_loaded(guitar_id: int, item: Mapping[str, Any]) -> dict:
    """Record built from a backing-file element: positional id first, other fields kept."""
    record: dict[str, Any] = {ID_FIELD: guitar_id}
    record.update((key, value) for key, value in item.items() if key != ID_FIELD)
    neck_length = item.get("neckLength")
    record["neckLength"] = None if is_blank(neck_length) else neck_length
    return record


def strip_id(record: Mapping[str, Any]) -> dict:
    return {key: value for key, value in record.items() if key != ID_FIELD}
