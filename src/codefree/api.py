# -*- coding: utf-8 -*-
"""
FastAPI API exposing the code-free sanitizer.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import __version__
from .auth import RequireApiKey
from .config import settings
from .logging_config import setup_logging
from .middleware import (
    DOCUMENTS_HEADER,
    REMOVED_CHARS_HEADER,
    RequestContextMiddleware,
    record_sanitize,
)
from .models import HealthResponse, SanitizeRequest, SanitizeResponse
from .pipeline import codefree_pipeline

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info("Starting codefree service", extra={"version": __version__})
    yield
    logger.info("Shutting down codefree service")


app = FastAPI(
    title="Codefree Service",
    description="Strips front matter, fenced code and inline code from markdown documents",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[settings.REQUEST_ID_HEADER, DOCUMENTS_HEADER, REMOVED_CHARS_HEADER],
)
app.add_middleware(RequestContextMiddleware)


def _check_document_size(text: str) -> None:
    if len(text) > settings.MAX_DOCUMENT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {settings.MAX_DOCUMENT_CHARS} characters",
        )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/sanitize", response_model=SanitizeResponse)
async def sanitize_document(request: SanitizeRequest, _auth: RequireApiKey) -> SanitizeResponse:
    """
    Return the code-free projection of a markdown document.

    - **text**: Raw document text
    """
    _check_document_size(request.text)

    result = codefree_pipeline.process(request.text)
    record_sanitize(result)

    logger.info(
        "Sanitize completed",
        extra={
            "original_length": result.original_length,
            "removed_chars": result.removed_chars,
            "steps_applied": result.steps_applied,
        },
    )
    return SanitizeResponse.from_result(result)


@app.post("/sanitize/batch", response_model=list[SanitizeResponse])
async def sanitize_batch(
        requests: list[SanitizeRequest], _auth: RequireApiKey
) -> list[SanitizeResponse]:
    """
    Sanitize several documents.

    Returns a list of SanitizeResponse in request order.
    """
    if len(requests) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.MAX_BATCH_SIZE} documents",
        )
    for request in requests:
        _check_document_size(request.text)

    logger.info("Batch sanitize request", extra={"document_count": len(requests)})

    responses = []
    for request in requests:
        result = codefree_pipeline.process(request.text)
        record_sanitize(result)
        responses.append(SanitizeResponse.from_result(result))
    return responses
