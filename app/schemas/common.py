from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Success envelope for the JSON API."""

    success: bool = True
    data: T | None = None


class ErrorResponse(BaseModel):
    """Error envelope, e.g. {"success": false, "error": "Not Found", "message": "..."}."""

    success: bool = False
    error: str
    message: str
