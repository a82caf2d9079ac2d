import logging
import os
import sys
from dataclasses import dataclass

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from database.category_dao import CategoryDAO
from database.payment_type_dao import PaymentTypeDAO
from database.place_dao import PlaceDAO
from database.beneficiary_dao import BeneficiaryDAO
from database.statistics_dao import StatisticsDAO

from services.transaction_service import TransactionService
from services.payment_type_service import PaymentTypeService
from services.report_service import ReportService
from services.chart_service import ChartService

from utils.app_config import get_log_level
from utils.constants import APP_NAME
from utils.currency import format_currency
from utils.log_setup import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class Services:
    transactions: TransactionService
    payment_types: PaymentTypeService
    reports: ReportService
    charts: ChartService
    categories: CategoryDAO
    places: PlaceDAO
    beneficiaries: BeneficiaryDAO


def build_services(db: DatabaseManager) -> Services:
    # ── DAOs ─────────────────────────────────────────────────────────────────
    tx_dao = TransactionDAO(db)
    category_dao = CategoryDAO(db)
    payment_type_dao = PaymentTypeDAO(db)
    place_dao = PlaceDAO(db)
    beneficiary_dao = BeneficiaryDAO(db)
    stats_dao = StatisticsDAO(db)

    # ── Services ─────────────────────────────────────────────────────────────
    return Services(
        transactions=TransactionService(
            tx_dao, category_dao, payment_type_dao, place_dao, beneficiary_dao, stats_dao
        ),
        payment_types=PaymentTypeService(payment_type_dao),
        reports=ReportService(tx_dao, stats_dao),
        charts=ChartService(),
        categories=category_dao,
        places=place_dao,
        beneficiaries=beneficiary_dao,
    )


def format_statistics(stats: dict) -> list[str]:
    return [
        f"Total Income: {format_currency(stats['total_income'])}",
        f"Total Expense: {format_currency(stats['total_expense'])}",
        f"Total Transactions: {stats['total_transactions']}",
        f"Max Transaction: {format_currency(stats['max_transaction'])}",
        f"Top Category: {stats['top_category'] or '-'}",
        f"Top Beneficiary: {stats['top_beneficiary'] or '-'}",
    ]


def main():
    configure_logging(get_log_level())
    logger.info("Starting %s", APP_NAME)

    db = DatabaseManager.from_config()
    try:
        services = build_services(db)
        print(APP_NAME)
        for line in format_statistics(services.reports.get_statistics()):
            print(line)
    finally:
        db.close()


if __name__ == "__main__":
    main()
