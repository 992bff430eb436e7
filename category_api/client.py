"""Category API client.

A thin wrapper around the Category API's HTTP interface built on the
``requests`` library.  It is meant for scripts and other services
that need to read or manage categories:

* :meth:`health` – check that the server is up.
* :meth:`list_categories` – return every category.
* :meth:`get_category` – fetch a single category by its identifier.
* :meth:`create_category` – create a category.
* :meth:`update_category` – replace a category's name and description.
* :meth:`delete_category` – delete a category.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``.  On failure ``data`` is empty and
``error`` is a dictionary with the keys ``status_code`` (``None`` for
transport failures) and ``message`` (the server's ``error`` text when
it sent one).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CATEGORIES_PATH = "/api/categories"

Error = Dict[str, Any]


class CategoryAPI:
    """Client for a running Category API server."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("error") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _item_path(category_id: Any) -> str:
        return f"{CATEGORIES_PATH}/{category_id}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the health payload, e.g. ``{"status": "OK", ...}``."""
        return self._request("GET", "/health")

    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all categories in the server's order."""
        data, error = self._request("GET", CATEGORIES_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_category(self, category_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._item_path(category_id))

    def create_category(
        self, name: str, description: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a category.  The returned record carries the new id."""
        payload = {"name": name, "description": description}
        return self._request("POST", CATEGORIES_PATH, json_body=payload)

    def update_category(
        self, category_id: Any, name: str, description: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace both fields of an existing category."""
        payload = {"name": name, "description": description}
        return self._request("PUT", self._item_path(category_id), json_body=payload)

    def delete_category(self, category_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a category.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._item_path(category_id))
        return error is None, error
