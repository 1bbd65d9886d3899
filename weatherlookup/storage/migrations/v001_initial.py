"""Initial schema: append-only search history."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS weather_history (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        city TEXT NOT NULL,
        temperature REAL NOT NULL,
        observed_at TEXT NOT NULL,
        recorded_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    (
        "CREATE INDEX IF NOT EXISTS idx_weather_history_recorded_at "
        "ON weather_history(recorded_at)"
    ),
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
