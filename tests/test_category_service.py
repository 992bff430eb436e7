"""Tests for the category service layer."""

import asyncio
import logging

import pytest

from category_api.app.schemas.category import CategoryIn
from category_api.app.services.category_service import CategoryService


@pytest.fixture
def service(store):
    return CategoryService(store)


def run(coro):
    return asyncio.run(coro)


class TestCategoryService:

    def test_create_ignores_supplied_id(self, service):
        created = run(service.create_category(CategoryIn(id=99, name="Snack", description="x")))

        assert created.id == 3
        assert run(service.get_category(3)) == created

    def test_update_uses_given_id(self, service):
        updated = run(service.update_category(1, CategoryIn(id=5, name="Roti")))

        assert (updated.id, updated.name, updated.description) == (1, "Roti", "")

    def test_update_missing_returns_none(self, service):
        assert run(service.update_category(3, CategoryIn(name="x"))) is None

    def test_delete(self, service):
        assert run(service.delete_category(1)) is True
        assert run(service.delete_category(1)) is False
        assert [c.id for c in run(service.list_categories())] == [2]

    def test_mutations_are_logged(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="category_api.app.services.category_service"):
            run(service.create_category(CategoryIn(name="Snack")))
            run(service.update_category(3, CategoryIn(name="Snacks")))
            run(service.delete_category(3))

        assert [r.getMessage() for r in caplog.records] == [
            "Created category 3",
            "Updated category 3",
            "Deleted category 3",
        ]
