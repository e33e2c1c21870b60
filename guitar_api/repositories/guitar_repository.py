"""In-memory guitar collection backed by the JSON file."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from guitar_api.domain.guitars import ID_FIELD, build_record, normalize_loaded, strip_id
from guitar_api.repositories import json_storage
from guitar_api.repositories.json_storage import StorageError

logger = logging.getLogger(__name__)


class GuitarRepository:
    """Owns the collection and the next-id counter.

    The collection is the source of truth while serving requests; the file
    only catches up when ``save`` runs after a mutation.
    """

    def __init__(self, data_file: Path, *, persist: bool = True, strict_load: bool = False) -> None:
        self.data_file = Path(data_file)
        self.persist = persist
        self.strict_load = strict_load
        self._guitars: list[dict] = []
        self._next_id = 1

    # -------------------------- file --------------------------
    def load(self) -> int:
        """Replace the collection with the file contents; returns the record count."""
        try:
            items = json_storage.load(self.data_file)
        except StorageError:
            if self.strict_load:
                raise
            logger.exception("Error loading data from %s", self.data_file.name)
            self._guitars = []
            self._next_id = 1
            return 0
        self._guitars = [normalize_loaded(position, item) for position, item in enumerate(items, start=1)]
        self._next_id = max((g[ID_FIELD] for g in self._guitars), default=0) + 1
        logger.info("Loaded %d guitars from %s", len(self._guitars), self.data_file.name)
        return len(self._guitars)

    def save(self) -> None:
        """Rewrite the whole file without ids. Failures are logged, never raised."""
        if not self.persist:
            logger.debug("Persistence disabled; skipping write to %s", self.data_file.name)
            return
        try:
            json_storage.save(self.data_file, [strip_id(g) for g in self._guitars])
        except StorageError:
            logger.exception("Error saving data to %s", self.data_file.name)
            return
        logger.info("Saved guitars to %s", self.data_file.name)

    # -------------------------- queries --------------------------
    def list_guitars(self) -> list[dict]:
        return list(self._guitars)

    def get_guitar(self, guitar_id: Optional[int]) -> Optional[dict]:
        if guitar_id is None:
            return None
        for guitar in self._guitars:
            if guitar[ID_FIELD] == guitar_id:
                return guitar
        return None

    def __len__(self) -> int:
        return len(self._guitars)

    @property
    def next_id(self) -> int:
        return self._next_id

    # -------------------------- mutations --------------------------
    def add_guitar(self, fields: dict[str, Any]) -> dict:
        guitar = build_record(self._next_id, fields)
        self._next_id += 1
        self._guitars.append(guitar)
        return guitar

    def update_guitar(self, guitar_id: Optional[int], changes: dict[str, Any]) -> Optional[dict]:
        guitar = self.get_guitar(guitar_id)
        if guitar is None:
            return None
        guitar.update(changes)
        return guitar

    def remove_guitar(self, guitar_id: Optional[int]) -> Optional[dict]:
        for index, guitar in enumerate(self._guitars):
            if guitar[ID_FIELD] == guitar_id:
                return self._guitars.pop(index)
        return None
