"""Database ports for the SQL-backed key store.

Infrastructure implementations provide the concrete engine so adapters can
depend on this protocol instead of configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding account keys."""

    def get_key_store_engine(self) -> Engine:
        """Get the engine for the key store database.

        Returns:
            Engine: SQLAlchemy engine connected to the key store.
        """


__all__ = ["DatabaseEnginePort"]
