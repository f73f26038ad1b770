"""Asset uploader storing logo images in a local directory."""

import random
import time
from pathlib import Path

from patrimony.application.ports.asset_uploader import (
    AssetUploaderPort,
    UploadedAsset,
    UploadedFilePort,
)
from patrimony.domain.errors import UploadError
from patrimony.infrastructure.logging.logger import get_app_logger


class LocalAssetUploader(AssetUploaderPort):
    """Write uploaded files under a directory served at a public prefix."""

    def __init__(
        self,
        uploads_dir: Path | str,
        public_prefix: str = "/uploads",
        logger=None,
    ) -> None:
        """Initialize the uploader.

        Args:
            uploads_dir: Directory receiving the files.
            public_prefix: URL prefix the directory is served under.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._uploads_dir = Path(uploads_dir)
        self._public_prefix = public_prefix.rstrip("/")
        self._logger = logger or get_app_logger()

    def upload(self, file: UploadedFilePort | None) -> UploadedAsset:
        """Store the file under a unique name.

        Args:
            file: Object exposing ``name`` and ``getvalue()`` or ``read()``.

        Returns:
            UploadedAsset: Public path of the stored file.

        Raises:
            UploadError: If no file was given, it is empty or the write fails.
        """
        if file is None:
            raise UploadError("No file uploaded.")
        content = self._read_content(file)
        if not content:
            raise UploadError("No file uploaded.")

        filename = self._unique_name(getattr(file, "name", "") or "")
        target = self._uploads_dir / filename
        try:
            self._uploads_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            self._logger.error(f"Error storing upload {filename}: {exc}")
            raise UploadError(f"Error uploading image: {exc}") from exc

        self._logger.info(f"Stored upload at {target}")
        return UploadedAsset(path=f"{self._public_prefix}/{filename}")

    @staticmethod
    def _read_content(file) -> bytes:
        if hasattr(file, "getvalue"):
            return file.getvalue()
        if hasattr(file, "read"):
            return file.read()
        raise UploadError(f"Unsupported upload object: {type(file).__name__}")

    @staticmethod
    def _unique_name(original_name: str) -> str:
        suffix = Path(original_name).suffix
        stamp = int(time.time() * 1000)
        return f"{stamp}-{random.randint(0, 10**9)}{suffix}"


__all__ = ["LocalAssetUploader"]
