"""Persistent storage for the OpenWeather API key."""

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

from bigrm.config.defaults import DEFAULT_KEY_NAME
from bigrm.errors import StorageAccessError

logger = logging.getLogger(__name__)


class CredentialStore:
    """A single named secret kept in the program's key/value table.

    The table may hold other entries; ``len(store)`` counts all of them,
    which is what decides between a stored lookup and the interactive prompt.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        key_name: str = DEFAULT_KEY_NAME,
        db_path: str | Path | None = None,
    ):
        self.conn = conn
        self.key_name = key_name
        self.db_path = db_path

    def __len__(self) -> int:
        try:
            return self.conn.execute("SELECT COUNT(*) FROM local_storage").fetchone()[0]
        except sqlite3.Error as e:
            raise StorageAccessError(f"Unable to read key store: {e}", self.db_path) from e

    def set_key(self, key: object) -> bool:
        """Persist ``key``, replacing any previous value. Empty or non-str keys are rejected."""
        if not isinstance(key, str) or not key:
            return False
        try:
            self.conn.execute(
                "INSERT INTO local_storage (key, value, updated_at) "
                "VALUES (?, ?, CURRENT_TIMESTAMP) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
                "updated_at = CURRENT_TIMESTAMP",
                (self.key_name, key),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageAccessError(f"Unable to write key store: {e}", self.db_path) from e
        logger.info("Stored API key under '%s'", self.key_name)
        return True

    def delete_key(self) -> bool:
        """Remove the stored key. False only when the store holds no entries at all."""
        if len(self) == 0:
            return False
        try:
            self.conn.execute(
                "DELETE FROM local_storage WHERE key = ?", (self.key_name,)
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageAccessError(f"Unable to write key store: {e}", self.db_path) from e
        logger.info("Removed API key '%s'", self.key_name)
        return True

    def get_key(self) -> str | None:
        try:
            row = self.conn.execute(
                "SELECT value FROM local_storage WHERE key = ?", (self.key_name,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageAccessError(f"Unable to read key store: {e}", self.db_path) from e
        if row is None:
            return None
        return row[0]


class Prompter(Protocol):
    def prompt_for_key(self, store: CredentialStore) -> str | None: ...


def resolve_api_key(store: CredentialStore, prompter: Prompter) -> str | None:
    """Return the stored key, asking the user only when the store is completely empty."""
    if len(store) > 0:
        return store.get_key()
    logger.debug("Key store is empty, prompting for an API key")
    return prompter.prompt_for_key(store)
