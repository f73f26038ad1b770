"""Factory helpers to select the snapshot store backend."""

from patrimony.application.ports.database import DatabaseEnginePort
from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.infrastructure.json_snapshot_store import JsonFileSnapshotStore
from patrimony.infrastructure.logging.logger import get_app_logger
from patrimony.infrastructure.settings import PatrimonySettings
from patrimony.infrastructure.sqlalchemy_snapshot_store import (
    SqlAlchemySnapshotStore,
)
from patrimony.utils.utils import get_project_root


def create_snapshot_store(
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    settings: PatrimonySettings | None = None,
) -> SnapshotStorePort:
    """Return a snapshot store implementation based on configuration.

    Args:
        db_port: Port providing the engine for the sqlalchemy backend.
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override.

    Returns:
        SnapshotStorePort: Concrete store implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend has no database port.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or PatrimonySettings.from_env()
    backend = resolved_settings.store_backend.strip().lower()

    if backend == "json":
        data_file = (
            resolved_settings.data_file
            or get_project_root() / "finance_data.json"
        )
        return JsonFileSnapshotStore(data_file, logger=resolved_logger)

    if backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError(
                "SQLAlchemy store backend requires a database adapter."
            )
        return SqlAlchemySnapshotStore(db_port, logger=resolved_logger)

    raise ValueError(
        "Unsupported snapshot store backend: "
        f"{backend}. Expected json or sqlalchemy."
    )


__all__ = ["create_snapshot_store"]
