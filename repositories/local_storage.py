# -*- coding: utf-8 -*-
"""
Local key-value storage.

String-to-string storage scoped to the local session, used to checkpoint
in-progress wizards. Two backends:
- InMemoryStorage: ephemeral, used by tests and when persistence is disabled
- SQLiteStorage: a single-table SQLite file that survives restarts
"""

import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from services.exceptions import StorageException
from utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStorage(ABC):
    """Abstract string-to-string storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all stored keys."""
        pass

    def clear(self) -> None:
        """Remove every key."""
        for key in self.keys():
            self.remove_item(key)

    def close(self) -> None:
        """Release any held resources."""
        pass


class InMemoryStorage(KeyValueStorage):
    """Dictionary-backed storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items.keys())

    def clear(self) -> None:
        self._items.clear()


class SQLiteStorage(KeyValueStorage):
    """SQLite-backed storage."""

    TABLE = "local_storage"

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize SQLite storage.

        Args:
            db_path: Database file. Defaults to Config.STORAGE_DB_PATH.
        """
        if db_path is None:
            from app.config import Config
            db_path = Config.STORAGE_DB_PATH

        self._db_path = Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def _get_connection(self) -> sqlite3.Connection:
        """Get connection, connecting and creating the table if needed."""
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(str(self._db_path))
                self._connection.execute(
                    f"CREATE TABLE IF NOT EXISTS {self.TABLE} ("
                    "key TEXT PRIMARY KEY, value TEXT NOT NULL)"
                )
                self._connection.commit()
                logger.debug(f"Opened local storage: {self._db_path}")
            except sqlite3.Error as e:
                self._connection = None
                raise StorageException(
                    f"Cannot open local storage at {self._db_path}", original_error=e
                ) from e
        return self._connection

    def get_item(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            row = conn.execute(
                f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"SQLite read error for {key}: {e}")
            raise StorageException("Read failed", key=key, original_error=e) from e
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            conn.execute(
                f"INSERT OR REPLACE INTO {self.TABLE} (key, value) VALUES (?, ?)",
                (key, str(value))
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite write error for {key}: {e}")
            raise StorageException("Write failed", key=key, original_error=e) from e

    def remove_item(self, key: str) -> None:
        conn = self._get_connection()
        try:
            conn.execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite delete error for {key}: {e}")
            raise StorageException("Delete failed", key=key, original_error=e) from e

    def keys(self) -> List[str]:
        conn = self._get_connection()
        try:
            rows = conn.execute(f"SELECT key FROM {self.TABLE} ORDER BY key").fetchall()
        except sqlite3.Error as e:
            raise StorageException("Listing keys failed", original_error=e) from e
        return [row[0] for row in rows]

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Local storage connection closed")


def create_storage(backend: Optional[str] = None) -> KeyValueStorage:
    """
    Create the storage backend selected in configuration.

    Args:
        backend: "sqlite" or "memory". Defaults to Config.STORAGE_BACKEND.
    """
    from app.config import Config

    backend = (backend or Config.STORAGE_BACKEND).lower()
    if backend == "memory":
        logger.info("Using in-memory local storage (checkpoints are not kept)")
        return InMemoryStorage()
    if backend != "sqlite":
        logger.warning(f"Unknown storage backend '{backend}', falling back to sqlite")
    return SQLiteStorage(Config.STORAGE_DB_PATH)
