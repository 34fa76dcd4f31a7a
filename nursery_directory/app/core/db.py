"""
SQLite-backed document store and simple migration system.

Nurseries, offers, categories, sponsors and site settings are kept as
schemaless JSON documents grouped into named collections, mirroring a
managed document database.  This module provides connection helpers
(``get_connection``, ``get_cursor``), schema migrations applied on
application start (``init_db``) and the small set of document calls
the rest of the application relies on:

* ``scan_collection`` reads every document of a collection;
* ``get_document`` reads a single document by id;
* ``put_document`` inserts or replaces a document (offline tooling only).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import json
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import settings


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # nursery_directory/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Document bodies are stored as JSON text and decoded by the
    helpers below, not by SQLite converters.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: document table
    (
        1,
        """
        -- One row per document.  ``data`` holds the JSON body without the id.
        CREATE TABLE IF NOT EXISTS documents (
            collection TEXT NOT NULL,
            id TEXT NOT NULL,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (collection, id)
        );
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  New migrations must be appended with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version


def scan_collection(collection: str) -> List[Tuple[str, Dict[str, Any]]]:
    """Return every document of ``collection`` as ``(id, data)`` pairs.

    Documents come back in insertion order, which is the only ordering
    a scan guarantees.  Errors from SQLite and undecodable bodies
    propagate to the caller.
    """
    conn = get_connection()
    try:
        rows = conn.execute(
            "SELECT id, data FROM documents WHERE collection = ? ORDER BY rowid",
            (collection,),
        ).fetchall()
        return [(row["id"], json.loads(row["data"])) for row in rows]
    finally:
        conn.close()


def get_document(collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
    """Return the body of a single document or ``None`` if it does not exist."""
    conn = get_connection()
    try:
        row = conn.execute(
            "SELECT data FROM documents WHERE collection = ? AND id = ?",
            (collection, doc_id),
        ).fetchone()
        if not row:
            return None
        return json.loads(row["data"])
    finally:
        conn.close()


def put_document(collection: str, doc_id: str, data: Dict[str, Any]) -> None:
    """Insert or replace a document.

    Replacing keeps the original row, so the document's position in
    ``scan_collection`` output does not change.
    """
    body = json.dumps(data, ensure_ascii=False)
    with get_cursor() as cursor:
        cursor.execute(
            """
            INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)
            ON CONFLICT(collection, id) DO UPDATE
            SET data = excluded.data, updated_at = CURRENT_TIMESTAMP
            """,
            (collection, doc_id, body),
        )
