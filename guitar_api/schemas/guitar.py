"""
Pydantic schemas for guitar API responses.

Guitar records themselves are returned as plain dicts so that extra fields
from the backing file pass through untouched; only the wrapper bodies are
modelled here.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class GuitarDeleted(BaseModel):
    """Body returned after a successful delete."""

    message: str = Field("Guitar deleted", description="Confirmation message")
    guitar: Dict[str, Any] = Field(..., description="The removed record, including its id")


class RefreshResult(BaseModel):
    """Body returned by the admin reload endpoint."""

    message: str
    count: int = Field(..., ge=0, description="Number of records loaded from the backing file")


class ErrorResponse(BaseModel):
    error: str
