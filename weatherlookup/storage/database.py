"""SQLite connection manager with WAL mode and migration support."""

import importlib
import logging
import sqlite3
from pathlib import Path

from weatherlookup.models.common import utc_now_iso

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "weatherlookup.storage.migrations"
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def connect(db_path: str | Path, check_same_thread: bool = True) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode enabled.

    Pass check_same_thread=False when a background worker shares the handle.
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending v###_*.py migrations in name order. Returns the ones applied."""
    with conn:
        conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_versions ("
            "  version TEXT PRIMARY KEY,"
            "  applied_at TEXT NOT NULL"
            ")"
        )
    done = {version for (version,) in conn.execute("SELECT version FROM schema_versions")}
    pending = [m.stem for m in sorted(MIGRATIONS_DIR.glob("v[0-9]*_*.py")) if m.stem not in done]

    for name in pending:
        migration = importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}")
        with conn:
            migration.up(conn)
            conn.execute(
                "INSERT INTO schema_versions (version, applied_at) VALUES (?, ?)",
                (name, utc_now_iso()),
            )
        logger.info("Applied migration %s", name)
    return pending
