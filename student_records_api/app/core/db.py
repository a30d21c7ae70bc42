"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and the
schema bootstrap run on application start (``init_db``).  SQLite is
used as an embedded document store: each student is kept as a JSON
document, with the fields the store queries or constrains (``name``,
``email``, ``age``) mirrored into indexed columns.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

SCHEMA = """
CREATE TABLE IF NOT EXISTS students (
    id TEXT PRIMARY KEY,
    name TEXT,
    email TEXT UNIQUE,
    age INTEGER,
    document TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_students_name ON students(name);
CREATE INDEX IF NOT EXISTS idx_students_age ON students(age);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute (or the special ``:memory:``
    name), use it directly.  Otherwise resolve it relative to the
    package root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # student_records_api/
    return str((base_dir / db_url).resolve())


def is_memory_database(database_url: Optional[str] = None) -> bool:
    """Return True if ``database_url`` names an in-memory SQLite database."""
    return get_database_path(database_url) == ":memory:"


def get_connection(database_url: Optional[str] = None, check_same_thread: bool = True) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory so columns can be accessed by
    name.  Timestamps live inside the JSON documents, so no SQLite type
    detection is enabled.  Every ``:memory:`` connection opens its own
    empty database; callers that need one to outlive a single operation
    must keep it open themselves and pass ``check_same_thread=False``
    if it is shared between threads.
    """
    conn = sqlite3.connect(get_database_path(database_url), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(
    database_url: Optional[str] = None,
    connection: Optional[sqlite3.Connection] = None,
) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block finishes without an
    exception and rolled back otherwise.  When ``connection`` is given
    it is used instead of a new one and left open afterwards.
    """
    conn = connection if connection is not None else get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        if connection is None:
            conn.close()


def init_db(database_url: Optional[str] = None, connection: Optional[sqlite3.Connection] = None) -> None:
    """Create the ``students`` table and its indices if they are missing."""
    with get_cursor(database_url, connection) as cursor:
        cursor.executescript(SCHEMA)
