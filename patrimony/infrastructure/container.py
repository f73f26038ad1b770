"""Composition root for wiring infrastructure adapters."""

from patrimony.application.ports.asset_uploader import AssetUploaderPort
from patrimony.application.ports.database import DatabaseEnginePort
from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from patrimony.infrastructure.local_asset_uploader import LocalAssetUploader
from patrimony.infrastructure.logging.logger import get_app_logger
from patrimony.infrastructure.settings import PatrimonySettings
from patrimony.infrastructure.snapshot_store_factory import (
    create_snapshot_store,
)
from patrimony.utils.utils import get_project_root


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_store(
    settings: PatrimonySettings | None = None,
) -> SnapshotStorePort:
    """Return the configured snapshot store."""
    resolved_settings = settings or PatrimonySettings.from_env()
    db_port = (
        build_database_adapter()
        if resolved_settings.store_backend == "sqlalchemy"
        else None
    )
    return create_snapshot_store(
        db_port,
        logger=get_app_logger(),
        settings=resolved_settings,
    )


def build_asset_uploader(
    settings: PatrimonySettings | None = None,
) -> AssetUploaderPort:
    """Return the local asset uploader."""
    resolved_settings = settings or PatrimonySettings.from_env()
    return LocalAssetUploader(
        resolved_settings.uploads_dir or get_project_root() / "uploads",
        public_prefix=resolved_settings.uploads_url,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_snapshot_store",
    "build_asset_uploader",
]
