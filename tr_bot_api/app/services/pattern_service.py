"""
Service layer for drum patterns.

This module provides the five queries the API needs on the
``patterns`` table: list all, get by id, insert, update by id and
delete by id.  Each call is a single statement on a fresh connection
obtained from the ``Database`` handle the service was built with.

Step sequences are stored as JSON text.  Rows leave the service as
plain dictionaries with the sequences already decoded; sanitizing them
for clients is the job of the API layer.

All queries use parameterized statements.  Database errors are not
caught here.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Dict, List, Mapping, Optional

from tr_bot_api.app.core.db import Database
from tr_bot_api.app.schemas.pattern import STEP_FIELDS

logger = logging.getLogger(__name__)

INSERT_COLUMNS = ("user_id", "name") + STEP_FIELDS
UPDATABLE_COLUMNS = ("name",) + STEP_FIELDS


class PatternService:
    """Service class for managing stored patterns."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_patterns(self) -> List[Dict[str, Any]]:
        """Return every stored pattern in storage order."""
        with self.db.get_cursor() as cursor:
            rows = cursor.execute("SELECT * FROM patterns ORDER BY id").fetchall()
            return [self._row_to_dict(row) for row in rows]

    async def get_pattern(self, pattern_id: int) -> Optional[Dict[str, Any]]:
        """Retrieve a single pattern by its ID, or ``None`` if absent."""
        with self.db.get_cursor() as cursor:
            row = cursor.execute(
                "SELECT * FROM patterns WHERE id = ?",
                (pattern_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_dict(row)

    async def create_pattern(self, pattern: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert a new pattern and return the stored row.

        The returned row includes the ``id`` assigned by the database.
        """
        values = [self._encode(column, pattern.get(column)) for column in INSERT_COLUMNS]
        placeholders = ", ".join("?" for _ in INSERT_COLUMNS)
        with self.db.get_cursor() as cursor:
            # Exhaust the RETURNING statement before the cursor commits.
            rows = cursor.execute(
                f"INSERT INTO patterns ({', '.join(INSERT_COLUMNS)}) "
                f"VALUES ({placeholders}) RETURNING *",
                values,
            ).fetchall()
            created = self._row_to_dict(rows[0])
        logger.info("Created pattern %s for user %s", created["id"], created["user_id"])
        return created

    async def update_pattern(self, pattern_id: int, fields: Mapping[str, Any]) -> int:
        """Overwrite the supplied columns of a pattern.

        Keys that are not updatable columns (``id``, ``user_id`` or
        anything unknown) are ignored.  Returns the number of affected
        rows, ``0`` when the pattern does not exist or nothing was
        supplied.
        """
        columns = [column for column in UPDATABLE_COLUMNS if column in fields]
        if not columns:
            return 0
        assignments = ", ".join(f"{column} = ?" for column in columns)
        values = [self._encode(column, fields[column]) for column in columns]
        with self.db.get_cursor() as cursor:
            cursor.execute(
                f"UPDATE patterns SET {assignments} WHERE id = ?",
                (*values, pattern_id),
            )
            affected = cursor.rowcount
        if affected:
            logger.info("Updated pattern %s (%s)", pattern_id, ", ".join(columns))
        return affected

    async def delete_pattern(self, pattern_id: int) -> int:
        """Delete a pattern by ID and return the number of affected rows."""
        with self.db.get_cursor() as cursor:
            cursor.execute("DELETE FROM patterns WHERE id = ?", (pattern_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted pattern %s", pattern_id)
        return affected

    @staticmethod
    def _encode(column: str, value: Any) -> Any:
        if column in STEP_FIELDS and value is not None:
            return json.dumps(list(value))
        return value

    @staticmethod
    def _row_to_dict(row: sqlite3.Row) -> Dict[str, Any]:
        """Convert a database row to a dictionary with decoded step sequences."""
        pattern = dict(row)
        for column in STEP_FIELDS:
            if pattern.get(column) is not None:
                pattern[column] = json.loads(pattern[column])
        return pattern
