"""Database connection and schema setup."""

import sqlite3

_SCHEMA = """
CREATE TABLE IF NOT EXISTS repos (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    storage_type TEXT NOT NULL,
    storage_settings TEXT NOT NULL DEFAULT '{}',
    flags INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS libraries (
    id TEXT PRIMARY KEY,
    owner_id TEXT NOT NULL,
    repo_id TEXT NOT NULL REFERENCES repos(id),
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    name TEXT NOT NULL
);
"""


def connect(url: str) -> sqlite3.Connection:
    """Open the database named by ``url``.

    Accepts ``sqlite://`` URLs (``sqlite:///relative`` or
    ``sqlite:////absolute``; an empty path means in-memory) and plain file
    paths. Any other URL scheme raises ValueError.
    """
    if url.startswith("sqlite://"):
        target = url[len("sqlite://"):]
        if target.startswith("/"):
            target = target[1:]
        if not target:
            target = ":memory:"
    elif "://" in url:
        raise ValueError(f"Unsupported database URL: {url}")
    else:
        target = url
    conn = sqlite3.connect(target, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the tables the application needs, if they are missing."""
    conn.executescript(_SCHEMA)
    conn.commit()