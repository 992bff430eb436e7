"""Tests for the requests-based Category API client.

The client talks to the in-process application through a requests
transport adapter, so the full HTTP round trip is exercised without
opening a socket.
"""

import pytest
import requests

from category_api.client import CategoryAPI

from .helpers import ASGIAdapter, UnreachableAdapter

BASE_URL = "http://testserver"


@pytest.fixture
def api(test_client):
    session = requests.Session()
    session.mount(BASE_URL, ASGIAdapter(test_client))
    return CategoryAPI(base_url=BASE_URL + "/", session=session)


class TestCategoryAPI:

    def test_health(self, api):
        assert api.health() == ({"status": "OK", "message": "API Running"}, None)

    def test_list(self, api):
        categories, error = api.list_categories()

        assert error is None
        assert [c["name"] for c in categories] == ["Makanan", "Minuman"]

    def test_create_update_delete(self, api):
        created, error = api.create_category("Snack", "x")
        assert error is None
        assert created == {"id": 3, "name": "Snack", "description": "x"}

        updated, error = api.update_category(3, "Snacks")
        assert error is None
        assert updated == {"id": 3, "name": "Snacks", "description": ""}

        assert api.delete_category(3) == (True, None)
        assert api.get_category(3) == (None, {"status_code": 404, "message": "Category not found"})

    def test_server_error_message_is_surfaced(self, api):
        data, error = api.get_category("abc")

        assert data is None
        assert error == {"status_code": 400, "message": "Invalid category ID"}

    def test_failed_delete(self, api):
        assert api.delete_category(99) == (False, {"status_code": 404, "message": "Category not found"})

    def test_unreachable_server(self):
        session = requests.Session()
        session.mount(BASE_URL, UnreachableAdapter())
        api = CategoryAPI(base_url=BASE_URL, session=session)

        categories, error = api.list_categories()

        assert categories == []
        assert error["status_code"] is None
        assert "connection refused" in error["message"]
