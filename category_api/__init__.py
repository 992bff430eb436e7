"""
Top‑level package for the Category API.

The HTTP application lives in the ``app`` subpackage
(``category_api.app.main:app``).  The process entry point is
``category_api.server`` and a small HTTP client for the service is
provided by ``category_api.client``.
"""

__all__ = []
