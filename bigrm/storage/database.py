"""SQLite connection manager for the local key/value store."""

import logging
import sqlite3
from pathlib import Path

from bigrm.errors import StorageAccessError

logger = logging.getLogger(__name__)

DDL = """
CREATE TABLE IF NOT EXISTS local_storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open the store, creating the file, its parent directory and table as needed."""
    path = Path(db_path).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(path))
        conn.row_factory = sqlite3.Row
        conn.execute(DDL)
        conn.commit()
    except (OSError, sqlite3.Error) as e:
        raise StorageAccessError(f"Unable to open key store: {e}", path) from e
    logger.debug("Opened key store at %s", path)
    return conn
