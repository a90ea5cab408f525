"""Key store backed by a SQL database through SQLAlchemy."""

import asyncio

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from near_accounts.application.ports.database import DatabaseEnginePort
from near_accounts.application.ports.key_store import (
    KeyStoreError,
    KeyStorePort,
)
from near_accounts.domain.models.keys import KeyPair
from near_accounts.infrastructure.logging.logger import get_app_logger


CREATE_ACCOUNT_KEYS_SQL = """
CREATE TABLE IF NOT EXISTS account_keys (
    network_id TEXT NOT NULL,
    account_id TEXT NOT NULL,
    public_key TEXT NOT NULL,
    private_key TEXT NOT NULL,
    PRIMARY KEY (network_id, account_id)
)
"""

DELETE_ACCOUNT_KEY_SQL = text(
    """
    DELETE FROM account_keys
    WHERE network_id = :network_id AND account_id = :account_id
    """
)

INSERT_ACCOUNT_KEY_SQL = text(
    """
    INSERT INTO account_keys (
        network_id,
        account_id,
        public_key,
        private_key
    )
    VALUES (
        :network_id,
        :account_id,
        :public_key,
        :private_key
    )
    """
)

SELECT_ACCOUNT_KEY_SQL = text(
    """
    SELECT public_key, private_key
    FROM account_keys
    WHERE network_id = :network_id AND account_id = :account_id
    """
)


class SqlAlchemyKeyStore(KeyStorePort):
    """Key store persisting key pairs in the ``account_keys`` table.

    Blocking SQLAlchemy calls run in a worker thread so the event loop is not
    held while the database answers.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the key store.

        Args:
            db_port: Port providing access to the key store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_destination(self) -> None:
        """Ensure the ``account_keys`` table exists."""
        engine = self._db_port.get_key_store_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ACCOUNT_KEYS_SQL)

    async def set_key(
        self,
        network_id: str,
        account_id: str,
        key_pair: KeyPair,
    ) -> None:
        await asyncio.to_thread(self._write, network_id, account_id, key_pair)

    async def get_key(self, network_id: str, account_id: str) -> KeyPair | None:
        return await asyncio.to_thread(self._read, network_id, account_id)

    def _write(self, network_id: str, account_id: str, key_pair: KeyPair) -> None:
        params = {"network_id": network_id, "account_id": account_id}
        try:
            self.prepare_destination()
            engine = self._db_port.get_key_store_engine()
            with engine.begin() as conn:
                conn.execute(DELETE_ACCOUNT_KEY_SQL, params)
                conn.execute(
                    INSERT_ACCOUNT_KEY_SQL,
                    {
                        **params,
                        "public_key": key_pair.public_key,
                        "private_key": key_pair.secret_key,
                    },
                )
        except (SQLAlchemyError, ImportError, RuntimeError) as exc:
            raise KeyStoreError(
                f"Cannot store key for {account_id} on {network_id}: {exc}"
            ) from exc
        self._logger.info(
            f"Key pair for {account_id} saved to account_keys ({network_id})"
        )

    def _read(self, network_id: str, account_id: str) -> KeyPair | None:
        try:
            self.prepare_destination()
            engine = self._db_port.get_key_store_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_ACCOUNT_KEY_SQL,
                    {"network_id": network_id, "account_id": account_id},
                ).first()
        except (SQLAlchemyError, ImportError, RuntimeError) as exc:
            raise KeyStoreError(
                f"Cannot read key for {account_id} on {network_id}: {exc}"
            ) from exc
        if row is None:
            return None
        return KeyPair(public_key=row.public_key, secret_key=row.private_key)


__all__ = [
    "SqlAlchemyKeyStore",
    "CREATE_ACCOUNT_KEYS_SQL",
    "DELETE_ACCOUNT_KEY_SQL",
    "INSERT_ACCOUNT_KEY_SQL",
    "SELECT_ACCOUNT_KEY_SQL",
]
