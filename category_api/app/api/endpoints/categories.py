"""
Category endpoints.

``/api/categories`` serves the collection (GET lists, POST creates)
and every path below ``/api/categories/`` addresses a single category
(GET, PUT, DELETE).  The item route captures the whole remainder of the
path, so ``/api/categories/1/2`` and ``/api/categories/`` reach the
handlers and are rejected as invalid ids instead of falling through to
a generic 404.  Methods without a handler get a 405 from the router.

Bodies are read through the ``category_from_body`` dependency instead
of a FastAPI body parameter, which would refuse JSON sent with a
``text/plain`` or form ``Content-Type``.  On PUT the id dependency is
declared first so a bad id is reported before a bad body.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from category_api.app.core.errors import CATEGORY_NOT_FOUND, INVALID_CATEGORY_ID, INVALID_REQUEST_BODY
from category_api.app.schemas.category import (
    Category,
    CategoryIn,
    parse_category_body,
    parse_category_id,
)
from category_api.app.schemas.common import ErrorResponse, MessageResponse
from category_api.app.services.category_service import CategoryService, get_category_service

router = APIRouter()

ITEM_PATH = "/{category_id:path}"

_bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

# Documents the body that ``category_from_body`` reads by hand.
_category_body = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": CategoryIn.model_json_schema()}},
    }
}


def category_id_from_path(
    category_id: str = Path(..., description="Integer id of the category"),
) -> int:
    """Parse the id segment, answering 400 when it is not an integer."""
    parsed = parse_category_id(category_id)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CATEGORY_ID)
    return parsed


async def category_from_body(request: Request) -> CategoryIn:
    """Decode the request body whatever its ``Content-Type``, answering 400 on failure."""
    category_in = parse_category_body(await request.body())
    if category_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_REQUEST_BODY)
    return category_in


@router.get("", response_model=List[Category])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> List[Category]:
    """Return every category in insertion order."""
    return await service.list_categories()


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    responses=_bad_request,
    openapi_extra=_category_body,
)
async def create_category(
    category_in: CategoryIn = Depends(category_from_body),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Create a category.  The id is assigned by the server."""
    return await service.create_category(category_in)


@router.get(ITEM_PATH, response_model=Category, responses={**_bad_request, **_not_found})
async def get_category(
    category_id: int = Depends(category_id_from_path),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    category = await service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CATEGORY_NOT_FOUND)
    return category


@router.put(
    ITEM_PATH,
    response_model=Category,
    responses={**_bad_request, **_not_found},
    openapi_extra=_category_body,
)
async def update_category(
    category_id: int = Depends(category_id_from_path),
    category_in: CategoryIn = Depends(category_from_body),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Replace a category.

    The body is validated before the lookup, so a malformed body sent to
    a missing id is a 400 rather than a 404.
    """
    category = await service.update_category(category_id, category_in)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CATEGORY_NOT_FOUND)
    return category


@router.delete(ITEM_PATH, response_model=MessageResponse, responses={**_bad_request, **_not_found})
async def delete_category(
    category_id: int = Depends(category_id_from_path),
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    deleted = await service.delete_category(category_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CATEGORY_NOT_FOUND)
    return MessageResponse(message="Category deleted")
