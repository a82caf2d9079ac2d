import logging
import sqlite3
from typing import Optional

from database.db_manager import DatabaseManager
from database.result import DbResult
from models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Transaction:
        return Transaction(
            id=row["id"],
            amount=row["amount"],
            date=row["date"],
            category_id=row["category_id"],
            category_name=row["category_name"],
            payment_type_id=row["payment_type_id"],
            payment_type_name=row["payment_type_name"],
            comment=row["comment"] or "",
            place_id=row["place_id"],
            place_name=row["place_name"],
            beneficiary_id=row["beneficiary_id"],
            beneficiary_name=row["beneficiary_name"],
            type_id=row["type_id"],
        )

    def _select(self) -> str:
        return """
            SELECT t.*,
                   c.name  AS category_name,
                   pt.name AS payment_type_name,
                   p.name  AS place_name,
                   b.name  AS beneficiary_name
            FROM transactions t
            JOIN categories c     ON t.category_id = c.id
            JOIN payment_types pt ON t.payment_type_id = pt.id
            LEFT JOIN places p        ON t.place_id = p.id
            LEFT JOIN beneficiaries b ON t.beneficiary_id = b.id
        """

    def _fetch(self, where: str = "", params: tuple = ()) -> list[Transaction]:
        try:
            rows = self._db.get_connection().execute(
                self._select() + where + " ORDER BY t.date ASC, t.id ASC", params
            ).fetchall()
        except sqlite3.Error:
            logger.exception("Failed to load transactions")
            return []
        return [self._row_to_model(r) for r in rows]

    def get_all(self) -> list[Transaction]:
        return self._fetch()

    def get_by_type(self, type_id: int) -> list[Transaction]:
        return self._fetch(" WHERE t.type_id = ?", (type_id,))

    def get_by_id(self, tx_id: int) -> Optional[Transaction]:
        try:
            row = self._db.get_connection().execute(
                self._select() + " WHERE t.id = ?", (tx_id,)
            ).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to load transaction %s", tx_id)
            return None
        return self._row_to_model(row) if row else None

    def add(self, tx: Transaction) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    """INSERT INTO transactions
                       (amount, date, category_id, payment_type_id, comment,
                        place_id, beneficiary_id, type_id)
                       VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                    (
                        tx.amount, tx.date, tx.category_id, tx.payment_type_id,
                        tx.comment, tx.place_id, tx.beneficiary_id, tx.type_id,
                    ),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to add transaction dated %s: %s", tx.date, exc)
            return DbResult.from_error(exc)
        return DbResult.success(cursor.lastrowid)

    def update(self, tx: Transaction) -> DbResult:
        """Replace every column except id."""
        if tx.id is None:
            return DbResult.not_found("Transaction has no id.")
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    """UPDATE transactions
                       SET amount=?, date=?, category_id=?, payment_type_id=?,
                           comment=?, place_id=?, beneficiary_id=?, type_id=?
                       WHERE id=?""",
                    (
                        tx.amount, tx.date, tx.category_id, tx.payment_type_id,
                        tx.comment, tx.place_id, tx.beneficiary_id, tx.type_id,
                        tx.id,
                    ),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to update transaction %s: %s", tx.id, exc)
            return DbResult.from_error(exc)
        if cursor.rowcount == 0:
            return DbResult.not_found(f"Transaction {tx.id} does not exist.")
        return DbResult.success(tx.id)

    def delete(self, tx_id: int) -> DbResult:
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    "DELETE FROM transactions WHERE id = ?", (tx_id,)
                )
        except sqlite3.Error as exc:
            logger.error("Failed to delete transaction %s: %s", tx_id, exc)
            return DbResult.from_error(exc)
        if cursor.rowcount == 0:
            return DbResult.not_found(f"Transaction {tx_id} does not exist.")
        return DbResult.success(tx_id)
