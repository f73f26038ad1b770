"""Snapshot store keeping the JSON document in a single database row."""

import json

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from patrimony.application.ports.database import DatabaseEnginePort
from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.errors import StorageError
from patrimony.domain.models import Document
from patrimony.infrastructure.document_codec import (
    document_from_dict,
    document_to_dict,
)
from patrimony.infrastructure.logging.logger import get_app_logger
from patrimony.utils.date_utils import format_timestamp, utc_now

DOCUMENT_ROW_ID = 1

CREATE_DOCUMENT_TABLE_SQL = text(
    """
    CREATE TABLE IF NOT EXISTS patrimony_document (
        id INTEGER PRIMARY KEY,
        payload TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """
)

SELECT_DOCUMENT_SQL = text(
    """
    SELECT payload
    FROM patrimony_document
    WHERE id = :id
    """
)

DELETE_DOCUMENT_SQL = text("DELETE FROM patrimony_document WHERE id = :id")

INSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO patrimony_document (id, payload, updated_at)
    VALUES (:id, :payload, :updated_at)
    """
)


class SqlAlchemySnapshotStore(SnapshotStorePort):
    """Store the whole document as JSON text in ``patrimony_document``."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def load(self) -> Document:
        """Return the stored document, empty when no row exists."""
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                conn.execute(CREATE_DOCUMENT_TABLE_SQL)
                row = conn.execute(
                    SELECT_DOCUMENT_SQL,
                    {"id": DOCUMENT_ROW_ID},
                ).first()
        except SQLAlchemyError as exc:
            self._logger.error(f"Error reading patrimony document: {exc}")
            raise StorageError(f"Error reading data: {exc}") from exc

        if row is None:
            self._logger.warning("No patrimony document stored; starting empty")
            return Document.empty()
        try:
            payload = json.loads(row.payload)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Error parsing data: {exc}") from exc
        return document_from_dict(payload)

    def save(self, document: Document) -> None:
        """Replace the stored row with the full document."""
        params = {
            "id": DOCUMENT_ROW_ID,
            "payload": json.dumps(document_to_dict(document)),
            "updated_at": format_timestamp(utc_now()),
        }
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                conn.execute(CREATE_DOCUMENT_TABLE_SQL)
                conn.execute(DELETE_DOCUMENT_SQL, {"id": DOCUMENT_ROW_ID})
                conn.execute(INSERT_DOCUMENT_SQL, params)
        except SQLAlchemyError as exc:
            self._logger.error(f"Error writing patrimony document: {exc}")
            raise StorageError(f"Error saving data: {exc}") from exc


__all__ = ["SqlAlchemySnapshotStore"]
