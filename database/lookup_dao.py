import logging
import sqlite3

from database.db_manager import DatabaseManager
from database.result import DbResult
from utils.constants import NOT_FOUND_ID

logger = logging.getLogger(__name__)


class NameLookupDAO:
    """Shared CRUD for the (id, name) lookup tables.

    Subclasses set `table` and `model`; the table name never comes from
    user input.
    """

    table: str = ""
    model: type = object

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row):
        return self.model(id=row["id"], name=row["name"])

    def get_all(self) -> list:
        try:
            rows = self._db.get_connection().execute(
                f"SELECT id, name FROM {self.table} ORDER BY name"
            ).fetchall()
        except sqlite3.Error:
            logger.exception("Failed to load %s", self.table)
            return []
        return [self._row_to_model(r) for r in rows]

    def get_all_names(self) -> list[str]:
        return [item.name for item in self.get_all()]

    def get_id_by_name(self, name: str) -> int:
        try:
            row = self._db.get_connection().execute(
                f"SELECT id FROM {self.table} WHERE name = ?", (name,)
            ).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to look up %r in %s", name, self.table)
            return NOT_FOUND_ID
        return row["id"] if row else NOT_FOUND_ID

    def add(self, name: str) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    f"INSERT INTO {self.table}(name) VALUES (?)", (name,)
                )
        except sqlite3.Error as exc:
            logger.error("Failed to add %r to %s: %s", name, self.table, exc)
            return DbResult.from_error(exc)
        return DbResult.success(cursor.lastrowid)

    def get_or_create(self, name: str) -> int:
        """Insert the name unless present and return its id in one unit of work."""
        try:
            with self._db.transaction() as conn:
                conn.execute(
                    f"INSERT INTO {self.table}(name) VALUES (?) ON CONFLICT(name) DO NOTHING",
                    (name,),
                )
                row = conn.execute(
                    f"SELECT id FROM {self.table} WHERE name = ?", (name,)
                ).fetchone()
        except sqlite3.Error as exc:
            logger.error("Failed to upsert %r into %s: %s", name, self.table, exc)
            return NOT_FOUND_ID
        return row["id"] if row else NOT_FOUND_ID

    def delete(self, entity_id: int) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    f"DELETE FROM {self.table} WHERE id = ?", (entity_id,)
                )
        except sqlite3.Error as exc:
            logger.error("Failed to delete %s id %s: %s", self.table, entity_id, exc)
            return DbResult.from_error(exc)
        if cursor.rowcount == 0:
            return DbResult.not_found(f"No row {entity_id} in {self.table}.")
        return DbResult.success(entity_id)
