"""Health check endpoint.

``/health`` answers every method with the same payload.  Only GET is
listed in the OpenAPI document.
"""

from fastapi import APIRouter

from category_api.app.schemas.common import HealthResponse

router = APIRouter()

OTHER_METHODS = ["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.get("/health", response_model=HealthResponse)
@router.api_route("/health", methods=OTHER_METHODS, response_model=HealthResponse, include_in_schema=False)
async def health_check() -> HealthResponse:
    """Report that the process is up.  Does not touch the collection."""
    return HealthResponse(status="OK", message="API Running")
