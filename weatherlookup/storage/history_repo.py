"""Repository for the weather_history table."""

import sqlite3


def save_search(
    conn: sqlite3.Connection,
    city: str,
    temperature_c: float,
    observed_at: str,
    recorded_at: str,
) -> int:
    """Persist one search. Returns the row id."""
    cursor = conn.execute(
        "INSERT INTO weather_history (city, temperature, observed_at, recorded_at) "
        "VALUES (?, ?, ?, ?)",
        (city, temperature_c, observed_at, recorded_at),
    )
    conn.commit()
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def get_recent_searches(conn: sqlite3.Connection, limit: int = 50) -> list[dict]:
    """Get the most recent searches, newest first by insertion order."""
    rows = conn.execute(
        "SELECT * FROM weather_history ORDER BY id DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [dict(r) for r in rows]
