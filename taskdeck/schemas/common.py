"""Shared API envelopes: message and error bodies."""

from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Success envelope carrying only a message (e.g. delete)."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    success: bool = False
    error: str = Field(..., description="Machine-readable error code")
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
