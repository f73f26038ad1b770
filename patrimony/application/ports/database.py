"""Database port for the SQL-backed snapshot store."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the SQLAlchemy engine holding the document."""

    def get_engine(self) -> Engine:
        """Get the engine for the patrimony database.

        Returns:
            Engine: SQLAlchemy engine.
        """


__all__ = ["DatabaseEnginePort"]
