"""
Application package initializer.

The service is organised the same way a larger API would be: request
and response models live in ``schemas``, the operations on the
category collection live in ``services``, the collection itself and
the cross‑cutting concerns (configuration, logging, error rendering)
live in ``core``, and the HTTP routes live in ``api/endpoints``.
"""

from .main import app  # noqa: F401
