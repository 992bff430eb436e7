"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from category_api.app.core.store import CategoryStore
from category_api.app.main import create_app


@pytest.fixture
def store() -> CategoryStore:
    """A freshly seeded store, private to one test."""
    return CategoryStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client
