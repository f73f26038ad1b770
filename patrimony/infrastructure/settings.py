"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from patrimony.infrastructure.logging.logger import get_app_logger
from patrimony.utils.utils import get_project_root

SUPPORTED_STORE_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class PatrimonySettings:
    """Settings for the snapshot store and the asset uploader.

    Attributes:
        store_backend: Snapshot store identifier (json or sqlalchemy).
        data_file: Path to the JSON document for the json backend.
        uploads_dir: Directory receiving logo uploads.
        uploads_url: Public prefix of uploaded asset paths.
    """

    store_backend: str = "json"
    data_file: Path | None = None
    uploads_dir: Path | None = None
    uploads_url: str = "/uploads"

    @classmethod
    def from_env(cls) -> "PatrimonySettings":
        """Build settings from environment variables.

        Returns:
            PatrimonySettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("PATRIMONY_STORE_BACKEND", "json").strip().lower()
        if backend not in SUPPORTED_STORE_BACKENDS:
            logger.warning(f"Unknown PATRIMONY_STORE_BACKEND value: {backend}")

        raw_data_file = os.getenv("PATRIMONY_DATA_FILE")
        data_file = (
            cls._normalize_path(raw_data_file)
            if raw_data_file
            else get_project_root() / "finance_data.json"
        )
        raw_uploads = os.getenv("PATRIMONY_UPLOADS_DIR")
        uploads_dir = (
            cls._normalize_path(raw_uploads)
            if raw_uploads
            else get_project_root() / "uploads"
        )
        uploads_url = os.getenv("PATRIMONY_UPLOADS_URL", "/uploads").strip()
        return cls(
            store_backend=backend,
            data_file=data_file,
            uploads_dir=uploads_dir,
            uploads_url=uploads_url or "/uploads",
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize a filesystem path or ``file://`` URI.

        Args:
            raw_path: Raw path string.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()


__all__ = ["PatrimonySettings", "SUPPORTED_STORE_BACKENDS"]
