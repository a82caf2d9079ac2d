import logging
from datetime import date
from typing import Callable, Iterable

from database.transaction_dao import TransactionDAO
from database.statistics_dao import StatisticsDAO
from models.transaction import Transaction
from utils.constants import TYPE_EXPENSE, TYPE_INCOME, TYPE_LABELS
from utils.date_helpers import format_month, parse_date, to_date

logger = logging.getLogger(__name__)


# ── Pure helpers over transaction snapshots ─────────────────────────────────

def filter_by_date_range(
    transactions: Iterable[Transaction],
    start: date | str | None = None,
    end: date | str | None = None,
) -> list[Transaction]:
    """Keep transactions dated within [start, end]; a None bound is open.

    Rows whose date cannot be parsed are dropped and logged.
    """
    start_d = to_date(start)
    end_d = to_date(end)
    result = []
    for tx in transactions:
        tx_date = parse_date(tx.date)
        if tx_date is None:
            logger.warning("Invalid date format in transaction %s: %r", tx.id, tx.date)
            continue
        if start_d is not None and tx_date < start_d:
            continue
        if end_d is not None and tx_date > end_d:
            continue
        result.append(tx)
    return result


def _group_by(
    transactions: Iterable[Transaction], key: Callable[[Transaction], str | None]
) -> dict[str, float]:
    totals: dict[str, float] = {}
    for tx in transactions:
        name = key(tx) or ""
        totals[name] = totals.get(name, 0.0) + tx.amount
    return totals


def group_by_category(transactions: Iterable[Transaction]) -> dict[str, float]:
    return _group_by(transactions, lambda tx: tx.category_name)


def group_by_payment_type(transactions: Iterable[Transaction]) -> dict[str, float]:
    return _group_by(transactions, lambda tx: tx.payment_type_name)


def percentage_of_total(group_sums: dict[str, float]) -> dict[str, float]:
    """Share of each group in percent. A non-positive total yields zeros."""
    total = sum(group_sums.values())
    if total <= 0:
        return {key: 0.0 for key in group_sums}
    return {key: 100 * value / total for key, value in group_sums.items()}


def total_amount(transactions: Iterable[Transaction]) -> float:
    return sum(tx.amount for tx in transactions)


def monthly_income_vs_expense(
    transactions: Iterable[Transaction],
) -> tuple[list[str], list[float], list[float]]:
    """Bucket by YYYY-MM. Returns (months, income, expense) aligned over the
    sorted union of months; a month missing from one series counts as 0.0."""
    income: dict[str, float] = {}
    expense: dict[str, float] = {}
    for tx in transactions:
        tx_date = parse_date(tx.date)
        if tx_date is None:
            logger.warning("Skipping transaction %s with invalid date %r", tx.id, tx.date)
            continue
        bucket = income if tx.type_id == TYPE_INCOME else expense
        month = format_month(tx_date)
        bucket[month] = bucket.get(month, 0.0) + tx.amount

    months = sorted(set(income) | set(expense))
    return (
        months,
        [income.get(m, 0.0) for m in months],
        [expense.get(m, 0.0) for m in months],
    )


# ── Service ──────────────────────────────────────────────────────────────────

class ReportService:
    def __init__(self, tx_dao: TransactionDAO, stats_dao: StatisticsDAO):
        self._tx_dao = tx_dao
        self._stats_dao = stats_dao

    def get_transactions(
        self,
        type_id: int | None = None,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> list[Transaction]:
        if type_id is None:
            transactions = self._tx_dao.get_all()
        else:
            transactions = self._tx_dao.get_by_type(type_id)
        if start is None and end is None:
            return transactions
        return filter_by_date_range(transactions, start, end)

    def get_category_breakdown(
        self,
        type_id: int = TYPE_EXPENSE,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> dict[str, float]:
        """Return {category: total} for pie chart."""
        return group_by_category(self.get_transactions(type_id, start, end))

    def get_payment_type_breakdown(
        self,
        type_id: int = TYPE_EXPENSE,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> dict[str, float]:
        return group_by_payment_type(self.get_transactions(type_id, start, end))

    def get_income_vs_expense(
        self,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> tuple[list[str], list[float], list[float]]:
        return monthly_income_vs_expense(self.get_transactions(None, start, end))

    def get_statistics(self) -> dict:
        income = self._stats_dao.get_total_income()
        expense = self._stats_dao.get_total_expense()
        return {
            "total_income": income,
            "total_expense": expense,
            "net": income - expense,
            "total_transactions": self._stats_dao.get_total_transactions(),
            "max_transaction": self._stats_dao.get_max_transaction_amount(),
            "top_category": self._stats_dao.get_most_used_category(),
            "top_beneficiary": self._stats_dao.get_top_beneficiary(),
        }

    def export_rows(self, transactions: Iterable[Transaction]) -> list[list[str]]:
        """Return rows suitable for CSV export."""
        header = ["Date", "Type", "Amount", "Category", "Payment Type",
                  "Place", "Beneficiary", "Comment"]
        rows = [header]
        for tx in transactions:
            rows.append([
                tx.date,
                TYPE_LABELS.get(tx.type_id, str(tx.type_id)),
                f"{tx.amount:.2f}",
                tx.category_name,
                tx.payment_type_name,
                tx.place_name or "",
                tx.beneficiary_name or "",
                tx.comment,
            ])
        return rows
