from abc import ABC, abstractmethod

import psycopg

from app.database.connection import get_connection
from app.database.exceptions import RecordStoreError


class BaseRecordStore(ABC):
    """Key/value persistence for serialized processing records."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write value under key, replacing any previous value.

        Raises:
            RecordStoreError: if the write fails.
        """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""

    @abstractmethod
    def list_keys(self, prefix: str = "") -> list[str]:
        """Return stored keys starting with prefix, sorted."""


class InMemoryRecordStore(BaseRecordStore):
    """Process-local store for development runs and tests."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def list_keys(self, prefix: str = "") -> list[str]:
        return sorted(key for key in self._values if key.startswith(prefix))


class PostgresRecordStore(BaseRecordStore):
    """Record store backed by the kv_entries table."""

    def ensure_table(self) -> None:
        """Create the kv_entries table if it does not exist yet."""
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv_entries (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                    )
                    """
                )
                conn.commit()
        except psycopg.Error as exc:
            raise RecordStoreError(f"Failed to create kv_entries table: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO kv_entries (key, value, updated_at)
                    VALUES (%s, %s, NOW())
                    ON CONFLICT (key)
                    DO UPDATE SET value = EXCLUDED.value, updated_at = NOW()
                    """,
                    (key, value),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise RecordStoreError(f"Failed to write {key}: {exc}") from exc

    def get(self, key: str) -> str | None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT value FROM kv_entries WHERE key = %s", (key,))
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise RecordStoreError(f"Failed to read {key}: {exc}") from exc

        if row is None:
            return None
        return str(row[0])

    def list_keys(self, prefix: str = "") -> list[str]:
        pattern = (
            prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        )
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT key FROM kv_entries WHERE key LIKE %s ORDER BY key",
                        (pattern,),
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise RecordStoreError(f"Failed to list keys for {prefix!r}: {exc}") from exc
        return [str(row[0]) for row in rows]
