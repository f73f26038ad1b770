"""Port for storing logo images out of band."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class UploadedAsset:
    """Reference to a stored asset.

    Attributes:
        path: Reference string to embed as ``Account.logo``.
    """

    path: str


class UploadedFilePort(Protocol):
    """Minimal file object accepted by uploaders."""

    name: str

    def getvalue(self) -> bytes:
        """Return the file content."""


class AssetUploaderPort(Protocol):
    """Port exposing binary asset uploads."""

    def upload(self, file: UploadedFilePort) -> UploadedAsset:
        """Store the file and return its reference.

        Raises:
            UploadError: If the file is missing, empty or cannot be stored.
        """


__all__ = ["UploadedAsset", "UploadedFilePort", "AssetUploaderPort"]
