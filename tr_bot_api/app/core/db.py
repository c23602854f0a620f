"""
SQLite database handle and simple migration system.

The ``Database`` class is the store handle of the application: it
knows where the database file lives, opens connections
(``get_connection``), yields short‑lived cursors (``get_cursor``) and
applies migrations on application start (``init_db``).  One instance
is created by ``create_app`` and attached to ``app.state.db``; nothing
in the package opens a connection without going through it.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)


# Step sequences are stored as JSON text; the service layer encodes and
# decodes them.
MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: patterns table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS patterns (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            kick_steps TEXT NOT NULL,
            snare_steps TEXT NOT NULL,
            hh1_steps TEXT NOT NULL,
            hh2_steps TEXT NOT NULL,
            clap_steps TEXT NOT NULL,
            perc_steps TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative paths are resolved
    against the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Handle on the SQLite database holding the ``patterns`` table."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be accessed
        by name.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the database if needed and apply pending migrations.

        If you add a migration, append it to ``MIGRATIONS`` with an
        incremented version number.
        """
        with self.get_cursor() as cursor:
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
                    logger.info("Applied migration %s to %s", version, self.path)
                    current_version = version
