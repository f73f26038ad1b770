"""Port for loading and saving the patrimony document.

Infrastructure implementations persist the whole document at once. There
is no concurrency token: the last ``save`` wins.
"""

from typing import Protocol

from patrimony.domain.models import Document


class SnapshotStorePort(Protocol):
    """Port exposing full-document reads and writes."""

    def load(self) -> Document:
        """Return the stored document, or an empty one if none exists.

        Raises:
            StorageError: If stored data is unreadable or corrupt.
        """

    def save(self, document: Document) -> None:
        """Overwrite the stored document.

        Raises:
            StorageError: If the write fails.
        """


__all__ = ["SnapshotStorePort"]
