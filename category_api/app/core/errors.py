"""
Error rendering for the API.

Handlers and dependencies signal failures by raising
``fastapi.HTTPException`` with a human readable ``detail``.  The
exception handlers registered by ``register_exception_handlers`` render
every error, including the 404/405 responses produced by the router
itself, as ``{"error": "<message>"}``.  Any request validation error
FastAPI raises on its own is reported as a 400 instead of a 422.
"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_CATEGORY_ID = "Invalid category ID"
INVALID_REQUEST_BODY = "Invalid request body"
CATEGORY_NOT_FOUND = "Category not found"
METHOD_NOT_ALLOWED = "Method not allowed"


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and message == HTTPStatus(405).phrase:
        message = METHOD_NOT_ALLOWED
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(exc.status_code, message, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_BODY)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
