import logging
import math
from dataclasses import replace
from datetime import date

from database.beneficiary_dao import BeneficiaryDAO
from database.category_dao import CategoryDAO
from database.payment_type_dao import PaymentTypeDAO
from database.place_dao import PlaceDAO
from database.result import DbResult
from database.statistics_dao import StatisticsDAO
from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from utils.constants import NOT_FOUND_ID, TRANSACTION_TYPES
from utils.date_helpers import format_date, is_future, parse_date, to_date

logger = logging.getLogger(__name__)


class TransactionService:
    """Name-based create/update for forms: resolves lookups to ids, then saves."""

    def __init__(
        self,
        tx_dao: TransactionDAO,
        category_dao: CategoryDAO,
        payment_type_dao: PaymentTypeDAO,
        place_dao: PlaceDAO,
        beneficiary_dao: BeneficiaryDAO,
        stats_dao: StatisticsDAO,
    ):
        self._dao = tx_dao
        self._category_dao = category_dao
        self._payment_type_dao = payment_type_dao
        self._place_dao = place_dao
        self._beneficiary_dao = beneficiary_dao
        self._stats_dao = stats_dao

    def get_all(self) -> list[Transaction]:
        return self._dao.get_all()

    def get_by_type(self, type_id: int) -> list[Transaction]:
        return self._dao.get_by_type(type_id)

    def create(
        self,
        type_id: int,
        amount: float,
        date: str,
        category_name: str,
        payment_type_name: str,
        comment: str = "",
        place_name: str | None = None,
        beneficiary_name: str | None = None,
    ) -> DbResult:
        tx = self._build(
            type_id, amount, date, category_name, payment_type_name,
            comment, place_name, beneficiary_name,
        )
        result = self._dao.add(tx)
        if not result:
            return result.with_message("Failed to add transaction.")
        logger.info("Added transaction %s (%s, %.2f)", result.value, tx.date, tx.amount)
        return result

    def update(
        self,
        tx_id: int,
        type_id: int,
        amount: float,
        date: str,
        category_name: str,
        payment_type_name: str,
        comment: str = "",
        place_name: str | None = None,
        beneficiary_name: str | None = None,
    ) -> DbResult:
        tx = self._build(
            type_id, amount, date, category_name, payment_type_name,
            comment, place_name, beneficiary_name,
        )
        tx.id = tx_id
        result = self._dao.update(tx)
        if not result:
            return result.with_message("Failed to update transaction.")
        return result

    def delete(self, tx_id: int) -> DbResult:
        result = self._dao.delete(tx_id)
        if not result:
            return result.with_message("Failed to delete transaction.")
        return result

    def copy(self, tx_id: int, new_date: date | str | None = None) -> DbResult:
        """Save a new transaction with the same fields as tx_id, optionally re-dated."""
        source = self._dao.get_by_id(tx_id)
        if source is None:
            return DbResult.not_found(f"Transaction {tx_id} does not exist.")
        copied = replace(source, id=None)
        if new_date is not None:
            copied.date = self._validate_date(format_date(to_date(new_date)))
        result = self._dao.add(copied)
        if not result:
            return result.with_message("Failed to add transaction.")
        return result

    def suggest_beneficiary(self, category_name: str | None) -> str | None:
        """Beneficiary most often used with the category, if any."""
        if not category_name or not category_name.strip():
            return None
        return self._stats_dao.get_top_beneficiary_by_category(category_name.strip())

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _build(
        self,
        type_id: int,
        amount: float,
        date: str,
        category_name: str,
        payment_type_name: str,
        comment: str,
        place_name: str | None,
        beneficiary_name: str | None,
    ) -> Transaction:
        if type_id not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid transaction type: {type_id}")
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError("Amount must be positive.")
        date = self._validate_date(date)

        category_id = self._category_dao.get_id_by_name(category_name or "")
        if category_id == NOT_FOUND_ID:
            raise ValueError(f"Unknown category: {category_name!r}")
        payment_type_id = self._payment_type_dao.get_id_by_name(payment_type_name or "")
        if payment_type_id == NOT_FOUND_ID:
            raise ValueError(f"Unknown payment type: {payment_type_name!r}")

        return Transaction(
            amount=amount,
            date=date,
            category_id=category_id,
            payment_type_id=payment_type_id,
            comment=(comment or "").strip(),
            type_id=type_id,
            place_id=self._resolve_optional(self._place_dao, place_name),
            beneficiary_id=self._resolve_optional(self._beneficiary_dao, beneficiary_name),
        )

    @staticmethod
    def _resolve_optional(dao, name: str | None) -> int | None:
        """Blank means no value; otherwise the row is created on first use."""
        if name is None or not name.strip():
            return None
        entity_id = dao.get_or_create(name.strip())
        if entity_id == NOT_FOUND_ID:
            raise ValueError(f"Could not save {name.strip()!r}.")
        return entity_id

    @staticmethod
    def _validate_date(date_str: str) -> str:
        d = parse_date(date_str)
        if d is None:
            raise ValueError("Invalid date format. Use YYYY-MM-DD.")
        if is_future(d):
            raise ValueError("Date cannot be in the future.")
        return format_date(d)
