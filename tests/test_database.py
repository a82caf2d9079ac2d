"""Tests for DatabaseManager schema setup, scoped transactions and DbResult."""

import sqlite3

import pytest

from database.db_manager import DatabaseManager
from database.result import DbResult, ResultKind


class TestDatabaseManager:
    def test_schema_tables(self, db):
        rows = db.get_connection().execute(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        ).fetchall()
        names = {r["name"] for r in rows}
        assert {"transactions", "categories", "payment_types", "places", "beneficiaries"} <= names

    def test_foreign_keys_enabled(self, db):
        assert db.get_connection().execute("PRAGMA foreign_keys").fetchone()[0] == 1

    def test_initialize_is_idempotent(self, db):
        before = db.get_connection().execute("SELECT COUNT(*) FROM categories").fetchone()[0]
        db.initialize()
        after = db.get_connection().execute("SELECT COUNT(*) FROM categories").fetchone()[0]
        assert before == after

    def test_transaction_rolls_back_on_error(self, db):
        with pytest.raises(RuntimeError):
            with db.transaction() as conn:
                conn.execute("INSERT INTO places(name) VALUES (?)", ("Berlin",))
                raise RuntimeError("boom")
        count = db.get_connection().execute("SELECT COUNT(*) FROM places").fetchone()[0]
        assert count == 0

    def test_transaction_commits(self, db):
        with db.transaction() as conn:
            conn.execute("INSERT INTO places(name) VALUES (?)", ("Berlin",))
        other = sqlite3.connect(db.db_path)
        try:
            assert other.execute("SELECT name FROM places").fetchall() == [("Berlin",)]
        finally:
            other.close()

    def test_close_and_reopen(self, db):
        db.close()
        assert db.get_connection().execute("SELECT 1").fetchone()[0] == 1

    def test_connection_closed_directly_stays_closed_until_close(self, db):
        db.get_connection().close()
        with pytest.raises(sqlite3.ProgrammingError):
            db.get_connection().execute("SELECT 1")

        db.close()
        assert db.get_connection().execute("SELECT 1").fetchone()[0] == 1

    def test_from_config(self, tmp_path, monkeypatch):
        db_path = str(tmp_path / "configured.db")
        monkeypatch.setattr("database.db_manager.get_db_path", lambda: db_path)
        manager = DatabaseManager.from_config()
        try:
            assert manager.db_path == db_path
            assert manager.get_connection().execute(
                "SELECT COUNT(*) FROM payment_types"
            ).fetchone()[0] == 1
        finally:
            manager.close()


class TestDbResult:
    def test_truthiness(self):
        assert DbResult.success(3)
        assert DbResult.success(3).value == 3
        assert not DbResult.not_found()

    def test_error_mapping(self):
        assert DbResult.from_error(sqlite3.IntegrityError("fk")).kind is ResultKind.CONSTRAINT_VIOLATION
        assert DbResult.from_error(sqlite3.OperationalError("locked")).kind is ResultKind.STORE_ERROR

    def test_with_message_keeps_kind(self):
        result = DbResult.from_error(sqlite3.IntegrityError("fk")).with_message("Failed.")
        assert result.kind is ResultKind.CONSTRAINT_VIOLATION
        assert result.message == "Failed."
        assert DbResult.not_found("gone").with_message(None).message == "gone"
