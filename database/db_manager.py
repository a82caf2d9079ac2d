import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from utils.app_config import get_db_path
from utils.constants import DB_FILE, DEFAULT_CATEGORIES, DEFAULT_PAYMENT_TYPES

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the single SQLite connection shared by every DAO.

    The connection is opened lazily and cached. close() drops the cache, so the
    next get_connection() reopens the file. A cached connection that was closed
    directly (not through close()) is not reopened: later DAO calls fail and
    degrade to STORE_ERROR results, empty lists or the -1 id.
    """

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            logger.debug("Opening database %s", self.db_path)
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Scoped unit of work: commit on success, roll back and re-raise on error."""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            try:
                conn.rollback()
            except sqlite3.Error:
                logger.debug("Rollback failed on %s", self.db_path)
            raise

    def initialize(self):
        """Create schema and seed defaults."""
        with self.transaction() as conn:
            self._create_schema(conn)
            self._seed_defaults(conn)

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS categories (
                id   INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE
            );

            CREATE TABLE IF NOT EXISTS payment_types (
                id              INTEGER PRIMARY KEY AUTOINCREMENT,
                name            TEXT NOT NULL UNIQUE,
                bank            TEXT NOT NULL DEFAULT '',
                issuer          TEXT NOT NULL DEFAULT '',
                issue_date      TEXT NOT NULL DEFAULT '',
                expiration_date TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS places (
                id   INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE
            );

            CREATE TABLE IF NOT EXISTS beneficiaries (
                id   INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE
            );

            CREATE TABLE IF NOT EXISTS transactions (
                id              INTEGER PRIMARY KEY AUTOINCREMENT,
                amount          REAL    NOT NULL,
                date            TEXT    NOT NULL,
                category_id     INTEGER NOT NULL REFERENCES categories(id) ON DELETE RESTRICT,
                payment_type_id INTEGER NOT NULL REFERENCES payment_types(id) ON DELETE RESTRICT,
                comment         TEXT    NOT NULL DEFAULT '',
                place_id        INTEGER REFERENCES places(id) ON DELETE RESTRICT,
                beneficiary_id  INTEGER REFERENCES beneficiaries(id) ON DELETE RESTRICT,
                type_id         INTEGER NOT NULL DEFAULT 0 CHECK(type_id IN (0, 1))
            );

            CREATE INDEX IF NOT EXISTS idx_transactions_date        ON transactions(date);
            CREATE INDEX IF NOT EXISTS idx_transactions_type_id     ON transactions(type_id);
            CREATE INDEX IF NOT EXISTS idx_transactions_category_id ON transactions(category_id);
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        for name in DEFAULT_CATEGORIES:
            conn.execute(
                "INSERT OR IGNORE INTO categories(name) VALUES (?)", (name,)
            )
        for pt in DEFAULT_PAYMENT_TYPES:
            conn.execute(
                """INSERT OR IGNORE INTO payment_types
                   (name, bank, issuer, issue_date, expiration_date)
                   VALUES (?, ?, ?, ?, ?)""",
                (pt["name"], pt["bank"], pt["issuer"], pt["issue_date"], pt["expiration_date"]),
            )

    @staticmethod
    def from_config() -> "DatabaseManager":
        """Startup factory: open and initialize the database named in the config file."""
        db = DatabaseManager(get_db_path())
        db.initialize()
        logger.info("Using database %s", db.db_path)
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
