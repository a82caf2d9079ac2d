APP_NAME = "Budget Tracker"
DB_FILE = "budget_tracker.db"
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

# Transaction discriminator
TYPE_EXPENSE = 0
TYPE_INCOME = 1
TRANSACTION_TYPES = (TYPE_EXPENSE, TYPE_INCOME)
TYPE_LABELS = {
    TYPE_EXPENSE: "Expense",
    TYPE_INCOME: "Income",
}

# Returned by *_id_by_name lookups when nothing matches
NOT_FOUND_ID = -1

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_CATEGORIES = [
    "Salary",
    "Food",
    "Rent",
    "Utilities",
    "Transport",
    "Healthcare",
    "Entertainment",
    "Other",
]

DEFAULT_PAYMENT_TYPES = [
    {"name": "Cash", "bank": "", "issuer": "", "issue_date": "", "expiration_date": ""},
]

INCOME_COLOR = "#4CAF50"
EXPENSE_COLOR = "#F44336"
