# -*- coding: utf-8 -*-
"""
Per-request context: request ID and sanitization metrics.

The middleware opens a context for every request. Endpoints add each
sanitized document to it, and the totals are reported back as response
headers and in a single access log line.
"""
import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .config import settings
from .pipeline import SanitizeResult

logger = logging.getLogger(__name__)

DOCUMENTS_HEADER = "X-Documents-Sanitized"
REMOVED_CHARS_HEADER = "X-Removed-Chars"


@dataclass
class SanitizeMetrics:
    """Totals over the documents sanitized during one request."""

    documents: int = 0
    original_chars: int = 0
    removed_chars: int = 0

    def add(self, result: SanitizeResult) -> None:
        self.documents += 1
        self.original_chars += result.original_length
        self.removed_chars += result.removed_chars


request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
# The metrics object is mutated in place so updates made inside the endpoint
# task are visible to the middleware
request_metrics_ctx: ContextVar[SanitizeMetrics | None] = ContextVar(
    "request_metrics", default=None
)


def get_request_id() -> str | None:
    """Get current request ID from context."""
    return request_id_ctx.get()


def record_sanitize(result: SanitizeResult) -> None:
    """Add a sanitized document to the current request metrics, if any."""
    metrics = request_metrics_ctx.get()
    if metrics is not None:
        metrics.add(result)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an ID and reports its sanitization totals."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(settings.REQUEST_ID_HEADER) or str(uuid.uuid4())
        metrics = SanitizeMetrics()

        id_token = request_id_ctx.set(request_id)
        metrics_token = request_metrics_ctx.set(metrics)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[settings.REQUEST_ID_HEADER] = request_id
            if metrics.documents:
                response.headers[DOCUMENTS_HEADER] = str(metrics.documents)
                response.headers[REMOVED_CHARS_HEADER] = str(metrics.removed_chars)

            logger.info(
                "Request completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                    "documents": metrics.documents,
                    "original_chars": metrics.original_chars,
                    "removed_chars": metrics.removed_chars,
                },
            )
            return response
        finally:
            request_metrics_ctx.reset(metrics_token)
            request_id_ctx.reset(id_token)
