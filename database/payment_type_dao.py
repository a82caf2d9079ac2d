import logging
import sqlite3
from typing import Optional

from database.db_manager import DatabaseManager
from database.result import DbResult
from models.payment_type import PaymentType
from utils.constants import NOT_FOUND_ID

logger = logging.getLogger(__name__)


class PaymentTypeDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> PaymentType:
        return PaymentType(
            id=row["id"],
            name=row["name"],
            bank=row["bank"],
            issuer=row["issuer"],
            issue_date=row["issue_date"],
            expiration_date=row["expiration_date"],
        )

    def get_all(self) -> list[PaymentType]:
        try:
            rows = self._db.get_connection().execute(
                "SELECT * FROM payment_types ORDER BY name"
            ).fetchall()
        except sqlite3.Error:
            logger.exception("Failed to load payment types")
            return []
        return [self._row_to_model(r) for r in rows]

    def get_all_names(self) -> list[str]:
        return [pt.name for pt in self.get_all()]

    def get_by_id(self, payment_type_id: int) -> Optional[PaymentType]:
        try:
            row = self._db.get_connection().execute(
                "SELECT * FROM payment_types WHERE id = ?", (payment_type_id,)
            ).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to load payment type %s", payment_type_id)
            return None
        return self._row_to_model(row) if row else None

    def get_id_by_name(self, name: str) -> int:
        try:
            row = self._db.get_connection().execute(
                "SELECT id FROM payment_types WHERE name = ?", (name,)
            ).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to look up payment type %r", name)
            return NOT_FOUND_ID
        return row["id"] if row else NOT_FOUND_ID

    def add(self, pt: PaymentType) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    """INSERT INTO payment_types
                       (name, bank, issuer, issue_date, expiration_date)
                       VALUES (?, ?, ?, ?, ?)""",
                    (pt.name, pt.bank, pt.issuer, pt.issue_date, pt.expiration_date),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to add payment type %r: %s", pt.name, exc)
            return DbResult.from_error(exc)
        return DbResult.success(cursor.lastrowid)

    def update(self, pt: PaymentType) -> DbResult:
        if pt.id is None:
            return DbResult.not_found("Payment type has no id.")
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    """UPDATE payment_types
                       SET name=?, bank=?, issuer=?, issue_date=?, expiration_date=?
                       WHERE id=?""",
                    (pt.name, pt.bank, pt.issuer, pt.issue_date, pt.expiration_date, pt.id),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to update payment type %s: %s", pt.id, exc)
            return DbResult.from_error(exc)
        if cursor.rowcount == 0:
            return DbResult.not_found(f"Payment type {pt.id} does not exist.")
        return DbResult.success(pt.id)

    def delete(self, payment_type_id: int) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    "DELETE FROM payment_types WHERE id = ?", (payment_type_id,)
                )
        except sqlite3.Error as exc:
            logger.error("Failed to delete payment type %s: %s", payment_type_id, exc)
            return DbResult.from_error(exc)
        if cursor.rowcount == 0:
            return DbResult.not_found(f"Payment type {payment_type_id} does not exist.")
        return DbResult.success(payment_type_id)
