# -*- coding: utf-8 -*-
"""
API key authentication for the /sanitize endpoints.
"""
import logging
import secrets
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyHeader

from .config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def is_auth_enabled() -> bool:
    """Check if authentication is enabled."""
    return bool(settings.API_KEY)


async def verify_api_key(api_key: Annotated[str | None, Depends(api_key_header)]) -> bool:
    """
    Verify API key from X-API-Key header.

    If API_KEY is not configured, authentication is disabled (open access).
    """
    if not is_auth_enabled():
        return True

    if not api_key:
        raise HTTPException(
            status_code=401,
            detail="Missing API key. Provide X-API-Key header.",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    if not secrets.compare_digest(api_key, settings.API_KEY):
        logger.warning("Invalid API key attempt")
        raise HTTPException(
            status_code=401,
            detail="Invalid API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    return True


# Dependency for protected API routes
RequireApiKey = Annotated[bool, Depends(verify_api_key)]
