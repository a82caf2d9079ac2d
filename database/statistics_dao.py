import logging
import sqlite3
from typing import Any, Optional

from database.db_manager import DatabaseManager
from utils.constants import TYPE_EXPENSE, TYPE_INCOME

logger = logging.getLogger(__name__)


class StatisticsDAO:
    """Single-value aggregates computed by the store."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _scalar(self, sql: str, params: tuple = (), default: Any = None) -> Any:
        try:
            row = self._db.get_connection().execute(sql, params).fetchone()
        except sqlite3.Error:
            logger.exception("Statistics query failed")
            return default
        if row is None or row[0] is None:
            return default
        return row[0]

    def get_total_income(self) -> float:
        return self._scalar(
            "SELECT SUM(amount) FROM transactions WHERE type_id = ?",
            (TYPE_INCOME,), 0.0,
        )

    def get_total_expense(self) -> float:
        return self._scalar(
            "SELECT SUM(amount) FROM transactions WHERE type_id = ?",
            (TYPE_EXPENSE,), 0.0,
        )

    def get_total_transactions(self) -> int:
        return self._scalar("SELECT COUNT(*) FROM transactions", default=0)

    def get_max_transaction_amount(self) -> float:
        return self._scalar("SELECT MAX(amount) FROM transactions", default=0.0)

    def get_most_used_category(self) -> Optional[str]:
        return self._scalar(
            """SELECT c.name
               FROM transactions t
               JOIN categories c ON t.category_id = c.id
               GROUP BY c.id
               ORDER BY COUNT(*) DESC, c.name ASC
               LIMIT 1"""
        )

    def get_top_beneficiary(self) -> Optional[str]:
        return self._scalar(
            """SELECT b.name
               FROM transactions t
               JOIN beneficiaries b ON t.beneficiary_id = b.id
               GROUP BY b.id
               ORDER BY COUNT(*) DESC, b.name ASC
               LIMIT 1"""
        )

    def get_top_beneficiary_by_category(self, category: str) -> Optional[str]:
        """Most frequent beneficiary among transactions in the named category."""
        return self._scalar(
            """SELECT b.name
               FROM transactions t
               JOIN beneficiaries b ON t.beneficiary_id = b.id
               JOIN categories c    ON t.category_id = c.id
               WHERE c.name = ?
               GROUP BY b.id
               ORDER BY COUNT(*) DESC, b.name ASC
               LIMIT 1""",
            (category,),
        )
