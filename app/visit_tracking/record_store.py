"""
Visit Record Store

Append-only JSON file storage for raw visit records.
"""

import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List

from pydantic import ValidationError

from analytics_service.models import VisitRecord

logger = logging.getLogger(__name__)


class StoreCorruptedError(RuntimeError):
    """Raised when the store file exists but cannot be decoded."""


class VisitRecordStore:
    """Append-only store of visit records backed by a JSON file."""

    def __init__(self, store_file: Path):
        """Initialize the record store.

        Args:
            store_file: Path to the JSON file holding all visit records
        """
        self.store_file = store_file
        self._lock = Lock()

        # Ensure store file exists
        if not self.store_file.exists():
            self.store_file.parent.mkdir(parents=True, exist_ok=True)
            self._save_entries([])

    def append(self, record: VisitRecord) -> None:
        """Append a single visit record.

        Args:
            record: The visit to persist

        Raises:
            StoreCorruptedError: If the existing file cannot be decoded; the
                file is left untouched
        """
        with self._lock:
            entries = self._load_entries()
            entries.append(record.model_dump(mode='json'))
            self._save_entries(entries)

    def load_all(self) -> List[VisitRecord]:
        """Load every stored visit record, oldest first.

        Entries that no longer validate are skipped. A store file that
        cannot be decoded reads as empty.

        Returns:
            List of VisitRecord objects
        """
        with self._lock:
            try:
                entries = self._load_entries()
            except StoreCorruptedError as exc:
                logger.error("%s", exc)
                return []

        records = []
        for index, entry in enumerate(entries):
            try:
                records.append(VisitRecord.model_validate(entry))
            except ValidationError as exc:
                logger.warning("Skipping malformed visit entry #%d in %s: %s", index, self.store_file, exc)
        return records

    def count(self) -> int:
        """Number of stored entries."""
        return len(self.load_all())

    def _load_entries(self) -> List[Dict[str, Any]]:
        """Load raw entries from file.

        Raises:
            StoreCorruptedError: If the file is not a JSON list
        """
        try:
            with open(self.store_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except json.JSONDecodeError as exc:
            raise StoreCorruptedError(f"Visit store {self.store_file} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StoreCorruptedError(f"Visit store {self.store_file} does not hold a JSON list")
        return data

    def _save_entries(self, entries: List[Dict[str, Any]]) -> None:
        """Save raw entries through a temporary file, then swap it in."""
        temp_path = self.store_file.with_name(f"{self.store_file.name}.tmp")
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(entries, f, indent=2, ensure_ascii=False)
            temp_path.replace(self.store_file)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise
