"""Tests for validators, date helpers, config and logging setup."""

import logging
from datetime import date, timedelta

import pytest

from utils import app_config
from utils.date_helpers import format_month, is_future, parse_date, to_date
from utils.log_setup import configure_logging
from utils.validators import (
    is_valid_amount,
    is_valid_category,
    is_valid_payment_type,
    is_valid_place_and_beneficiary,
)


class TestValidators:
    @pytest.mark.parametrize("text", ["100.0", "0.01", " 12 "])
    def test_valid_amounts(self, text):
        assert is_valid_amount(text)

    @pytest.mark.parametrize("text", ["-50", "abc", "", " ", "100.00.1", "0", None, "inf", "nan", "-inf"])
    def test_invalid_amounts(self, text):
        assert not is_valid_amount(text)

    def test_category(self):
        assert is_valid_category("Food")
        assert not is_valid_category("")
        assert not is_valid_category(None)

    def test_payment_type(self):
        assert is_valid_payment_type("Card")
        assert not is_valid_payment_type(None)

    def test_place_and_beneficiary(self):
        assert is_valid_place_and_beneficiary("Berlin", "Lidl")
        assert not is_valid_place_and_beneficiary("", "Lidl")
        assert not is_valid_place_and_beneficiary("Berlin", "")


class TestDateHelpers:
    @pytest.mark.parametrize("text, expected", [
        ("2025-04-21", date(2025, 4, 21)),
        ("2025-4-7", date(2025, 4, 7)),
        (" 2025-04-21 ", date(2025, 4, 21)),
    ])
    def test_parse(self, text, expected):
        assert parse_date(text) == expected

    @pytest.mark.parametrize("text", [None, "", "2025-02-30", "21/04/2025", "2025-04"])
    def test_parse_failures(self, text):
        assert parse_date(text) is None

    def test_to_date(self):
        d = date(2025, 1, 1)
        assert to_date(d) is d
        assert to_date(None) is None
        assert to_date("2025-01-01") == d
        with pytest.raises(ValueError):
            to_date("soon")

    def test_format_month(self):
        assert format_month(date(2025, 4, 21)) == "2025-04"

    def test_is_future(self):
        assert is_future(date.today() + timedelta(days=1))
        assert not is_future(date.today())


class TestAppConfig:
    def test_missing_file_is_empty(self, tmp_path):
        assert app_config.load_config(tmp_path / "missing.json") == {}

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert app_config.load_config(path) == {}

    def test_db_path_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        assert app_config.get_db_path(path) == "budget_tracker.db"

        app_config.set_db_path("/data/budget.db", path)
        assert app_config.get_db_path(path) == "/data/budget.db"
        assert not path.with_suffix(".tmp").exists()

        app_config.set_db_path(None, path)
        assert app_config.get_db_path(path) == "budget_tracker.db"

    def test_log_level(self, tmp_path):
        path = tmp_path / "config.json"
        assert app_config.get_log_level(path) == "INFO"
        app_config.save_config({"log_level": "debug"}, path)
        assert app_config.get_log_level(path) == "DEBUG"


def test_configure_logging_accepts_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    configure_logging("nonsense")
    assert [c["level"] for c in calls] == [logging.DEBUG, logging.INFO]
