"""Search history store backed by SQLite."""

import sqlite3
from dataclasses import replace
from pathlib import Path

from weatherlookup.errors import StorageError
from weatherlookup.models.common import utc_now_iso
from weatherlookup.models.history import HistoryRecord
from weatherlookup.storage import history_repo
from weatherlookup.storage.database import connect, run_migrations

MAX_HISTORY = 50


class SearchHistoryStore:
    """Append-only log of past searches.

    Records are never updated or deleted. Reads return at most MAX_HISTORY
    rows, newest first.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = str(db_path)
        try:
            self._conn = connect(db_path, check_same_thread=False)
            run_migrations(self._conn)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Cannot open history database {self.db_path}: {e}") from e

    def append(self, record: HistoryRecord) -> HistoryRecord:
        """Store a record, stamping recorded_at. Returns the stored record."""
        stored = replace(record, recorded_at=utc_now_iso())
        try:
            history_repo.save_search(
                self._conn,
                stored.city,
                stored.temperature_c,
                stored.observed_at,
                stored.recorded_at,
            )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save search for {record.city!r}: {e}") from e
        return stored

    def recent(self, limit: int = MAX_HISTORY) -> list[HistoryRecord]:
        if limit <= 0:
            return []
        try:
            rows = history_repo.get_recent_searches(self._conn, min(limit, MAX_HISTORY))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read search history: {e}") from e
        return [
            HistoryRecord(
                city=r["city"],
                temperature_c=r["temperature"],
                observed_at=r["observed_at"],
                recorded_at=r["recorded_at"],
            )
            for r in rows
        ]

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SearchHistoryStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
