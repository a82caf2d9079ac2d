"""Pytest configuration and fixtures."""

import pytest

from database.beneficiary_dao import BeneficiaryDAO
from database.category_dao import CategoryDAO
from database.db_manager import DatabaseManager
from database.payment_type_dao import PaymentTypeDAO
from database.place_dao import PlaceDAO
from database.statistics_dao import StatisticsDAO
from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from services.report_service import ReportService
from services.transaction_service import TransactionService
from utils.constants import TYPE_EXPENSE


@pytest.fixture
def db(tmp_path):
    """Initialized database in a temporary file, closed after the test."""
    manager = DatabaseManager(str(tmp_path / "test_budget.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def tx_dao(db):
    return TransactionDAO(db)


@pytest.fixture
def category_dao(db):
    return CategoryDAO(db)


@pytest.fixture
def payment_type_dao(db):
    return PaymentTypeDAO(db)


@pytest.fixture
def place_dao(db):
    return PlaceDAO(db)


@pytest.fixture
def beneficiary_dao(db):
    return BeneficiaryDAO(db)


@pytest.fixture
def stats_dao(db):
    return StatisticsDAO(db)


@pytest.fixture
def tx_service(tx_dao, category_dao, payment_type_dao, place_dao, beneficiary_dao, stats_dao):
    return TransactionService(
        tx_dao, category_dao, payment_type_dao, place_dao, beneficiary_dao, stats_dao
    )


@pytest.fixture
def report_service(tx_dao, stats_dao):
    return ReportService(tx_dao, stats_dao)


@pytest.fixture
def food_id(category_dao):
    return category_dao.get_id_by_name("Food")


@pytest.fixture
def salary_id(category_dao):
    return category_dao.get_id_by_name("Salary")


@pytest.fixture
def cash_id(payment_type_dao):
    return payment_type_dao.get_id_by_name("Cash")


@pytest.fixture
def make_tx(food_id, cash_id):
    """Factory for unsaved transactions referencing seeded lookups."""

    def _make(**overrides) -> Transaction:
        fields = {
            "amount": 10.0,
            "date": "2025-04-21",
            "category_id": food_id,
            "payment_type_id": cash_id,
            "comment": "",
            "type_id": TYPE_EXPENSE,
        }
        fields.update(overrides)
        return Transaction(**fields)

    return _make
