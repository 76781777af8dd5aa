# -*- coding: utf-8 -*-
"""
Pydantic data models for the API.
"""
from pydantic import BaseModel, Field

from .pipeline import SanitizeResult


class SanitizeRequest(BaseModel):
    """Sanitization request schema."""

    text: str = Field(..., description="Raw markdown document text")


class SanitizeResponse(BaseModel):
    """Sanitization response schema."""

    text: str
    original_length: int = 0
    sanitized_length: int = 0
    removed_chars: int = 0
    steps_applied: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: SanitizeResult) -> "SanitizeResponse":
        return cls(
            text=result.text,
            original_length=result.original_length,
            sanitized_length=len(result.text),
            removed_chars=result.removed_chars,
            steps_applied=list(result.steps_applied),
        )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
