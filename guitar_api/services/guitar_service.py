"""Guitar use cases (create, update, delete, reload)."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from guitar_api.domain.guitars import (
    REQUIRED_FIELDS,
    field_updates,
    missing_fields,
    parse_guitar_id,
)
from guitar_api.repositories.guitar_repository import GuitarRepository

logger = logging.getLogger(__name__)


class GuitarError(Exception):
    """Base exception for guitar workflow."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GuitarNotFoundError(GuitarError):
    """Raised when no record matches the requested id."""

    status_code = 404

    def __init__(self, message: str = "Guitar not found"):
        super().__init__(message)


class MissingFieldsError(GuitarError):
    """Raised when a creation body lacks one of the required fields."""

    def __init__(self, missing: list[str]):
        super().__init__("Missing required fields. Required: " + ", ".join(REQUIRED_FIELDS))
        self.missing = missing


class GuitarService:
    """Maps request payloads onto the repository and persists mutations."""

    def __init__(self, repository: GuitarRepository) -> None:
        self.repository = repository

    def list_guitars(self) -> list[dict]:
        return self.repository.list_guitars()

    def get_guitar(self, raw_id: str) -> dict:
        guitar = self.repository.get_guitar(parse_guitar_id(raw_id))
        if guitar is None:
            raise GuitarNotFoundError()
        return guitar

    def create_guitar(self, payload: Optional[Mapping[str, Any]]) -> dict:
        missing = missing_fields(payload)
        if missing:
            error = MissingFieldsError(missing)
            logger.info("Rejected guitar: missing %s", ", ".join(error.missing))
            raise error
        guitar = self.repository.add_guitar(dict(payload))
        self.repository.save()
        logger.info("Created guitar %s", guitar["id"])
        return guitar

    def update_guitar(self, raw_id: str, payload: Optional[Mapping[str, Any]]) -> dict:
        guitar = self.repository.update_guitar(parse_guitar_id(raw_id), field_updates(payload))
        if guitar is None:
            raise GuitarNotFoundError()
        self.repository.save()
        logger.info("Updated guitar %s", guitar["id"])
        return guitar

    def delete_guitar(self, raw_id: str) -> dict:
        guitar = self.repository.remove_guitar(parse_guitar_id(raw_id))
        if guitar is None:
            raise GuitarNotFoundError()
        self.repository.save()
        logger.info("Deleted guitar %s", guitar["id"])
        return guitar

    def reload(self) -> int:
        """Discard in-memory state and re-read the backing file."""
        count = self.repository.load()
        logger.info("Reloaded %d guitars from %s", count, self.repository.data_file.name)
        return count
