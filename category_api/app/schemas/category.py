"""
Pydantic schemas for categories.

A category is a flat record of an integer ``id`` and two free‑form
strings.  Clients never choose the id: it is assigned by the server on
create and taken from the URL on update, so ``CategoryIn`` accepts an
``id`` key only to ignore it.

Request bodies are decoded by ``parse_category_body`` rather than by
FastAPI, so the ``Content-Type`` header plays no part: any body whose
first JSON value is an object of the right shape is accepted.
"""

import json
import re
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator


class CategoryIn(BaseModel):
    """Request body for creating or replacing a category.

    Missing fields and explicit ``null`` values become empty strings,
    and unknown keys are ignored.  ``id`` must be a JSON integer when
    present; strings, floats and booleans are rejected.
    """

    id: Optional[StrictInt] = Field(None, description="Ignored; ids are assigned by the server")
    name: str = Field("", description="Display name of the category")
    description: str = Field("", description="Free‑form description")

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Category(BaseModel):
    """A stored category as returned by the API."""

    id: int
    name: str
    description: str


_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2**63), 2**63 - 1

_JSON_WHITESPACE = " \t\n\r"
_decoder = json.JSONDecoder()


def parse_category_id(raw: str) -> Optional[int]:
    """Parse the id segment of ``/api/categories/{id}``.

    Only an optionally signed run of ASCII digits that fits in a signed
    64‑bit integer is accepted; an empty segment, letters, further path
    segments (``"1/2"``) or out of range values give ``None``.
    """
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        return None
    return value


def parse_category_body(raw: bytes) -> Optional[CategoryIn]:
    """Decode a create/update request body.

    Only the first JSON value is read; anything after it is ignored.  A
    bare ``null`` counts as an empty object.  Returns ``None`` when the
    body is empty, is not JSON, or is not an object of the right shape.
    """
    text = raw.decode("utf-8", errors="replace").lstrip(_JSON_WHITESPACE)
    try:
        value, _ = _decoder.raw_decode(text)
    except json.JSONDecodeError:
        return None
    if value is None:
        return CategoryIn()
    try:
        return CategoryIn.model_validate(value)
    except ValidationError:
        return None
