"""Snapshot store backed by a single JSON file."""

import json
import os
from pathlib import Path

from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.errors import StorageError
from patrimony.domain.models import Document
from patrimony.infrastructure.document_codec import (
    document_from_dict,
    document_to_dict,
)
from patrimony.infrastructure.logging.logger import get_app_logger


class JsonFileSnapshotStore(SnapshotStorePort):
    """Store the whole document as one pretty-printed JSON file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Document:
        """Return the stored document, empty when the file is missing."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._logger.warning(
                f"Data file not found at {self._path}; starting empty"
            )
            return Document.empty()
        except OSError as exc:
            self._logger.error(f"Error reading data file {self._path}: {exc}")
            raise StorageError(f"Error reading data: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            self._logger.error(f"Error parsing JSON in {self._path}: {exc}")
            raise StorageError(f"Error parsing data: {exc}") from exc
        return document_from_dict(payload)

    def save(self, document: Document) -> None:
        """Overwrite the JSON file with the full document."""
        payload = json.dumps(document_to_dict(document), indent=2)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            self._logger.error(f"Error writing data file {self._path}: {exc}")
            raise StorageError(f"Error saving data: {exc}") from exc


__all__ = ["JsonFileSnapshotStore"]
