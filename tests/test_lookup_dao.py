"""Tests for the name lookup DAOs (categories, places, beneficiaries)."""

import pytest

from database.result import ResultKind
from utils.constants import DEFAULT_CATEGORIES, NOT_FOUND_ID


class TestCategoryDAO:
    def test_seeded_categories_are_listed(self, category_dao):
        assert set(category_dao.get_all_names()) == set(DEFAULT_CATEGORIES)

    def test_id_by_name(self, category_dao):
        food = category_dao.get_id_by_name("Food")
        assert food > 0
        assert [c.id for c in category_dao.get_all() if c.name == "Food"] == [food]

    def test_unknown_name_returns_sentinel(self, category_dao):
        assert category_dao.get_id_by_name("Nope") == NOT_FOUND_ID

    def test_lookup_is_exact_match(self, category_dao):
        assert category_dao.get_id_by_name("food") == NOT_FOUND_ID
        assert category_dao.get_id_by_name(" Food") == NOT_FOUND_ID

    def test_add_duplicate_is_constraint_violation(self, category_dao):
        result = category_dao.add("Food")
        assert result.kind is ResultKind.CONSTRAINT_VIOLATION

    def test_delete_referenced_category_is_blocked(self, category_dao, tx_dao, make_tx, food_id):
        tx_dao.add(make_tx())
        result = category_dao.delete(food_id)
        assert result.kind is ResultKind.CONSTRAINT_VIOLATION
        assert category_dao.get_id_by_name("Food") == food_id

    def test_delete_unused_category(self, category_dao):
        new_id = category_dao.add("Gifts").value
        assert category_dao.delete(new_id)
        assert category_dao.get_id_by_name("Gifts") == NOT_FOUND_ID

    def test_store_error_degrades_to_empty_and_sentinel(self, db, category_dao):
        db.get_connection().close()
        assert category_dao.get_all_names() == []
        assert category_dao.get_id_by_name("Food") == NOT_FOUND_ID
        assert category_dao.add("Gifts").kind is ResultKind.STORE_ERROR


@pytest.mark.parametrize("dao_fixture", ["place_dao", "beneficiary_dao"])
class TestOptionalLookups:
    def test_empty_by_default(self, request, dao_fixture):
        dao = request.getfixturevalue(dao_fixture)
        assert dao.get_all_names() == []

    def test_add_then_lookup(self, request, dao_fixture):
        dao = request.getfixturevalue(dao_fixture)
        result = dao.add("Lidl")
        assert result
        assert dao.get_id_by_name("Lidl") == result.value
        assert dao.get_all_names() == ["Lidl"]

    def test_get_or_create_is_idempotent(self, request, dao_fixture):
        dao = request.getfixturevalue(dao_fixture)
        first = dao.get_or_create("Berlin")
        second = dao.get_or_create("Berlin")
        assert first == second != NOT_FOUND_ID
        assert dao.get_all_names() == ["Berlin"]

    def test_get_or_create_returns_existing_id(self, request, dao_fixture):
        dao = request.getfixturevalue(dao_fixture)
        existing = dao.add("Aldi").value
        assert dao.get_or_create("Aldi") == existing

    def test_get_or_create_on_store_error(self, request, db, dao_fixture):
        dao = request.getfixturevalue(dao_fixture)
        db.get_connection().close()
        assert dao.get_or_create("Berlin") == NOT_FOUND_ID
