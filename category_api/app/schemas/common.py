"""Response bodies shared by several endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx response."""

    error: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
