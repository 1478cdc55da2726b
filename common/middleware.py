"""
common.middleware
~~~~~~~~~~~~~~~~~
Structured request logging powered by structlog.
"""
import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class StructuredLoggingMiddleware:
    """
    Binds a ``request_id`` into structlog's context variables for the life of
    the request, so every event logged while handling it carries the id, then
    emits one ``http_request`` record.

    Log record fields:
        request_id  – Value of ``X-Request-ID`` if sent, else a new uuid4 hex
        method      – HTTP verb
        path        – URL path with query string
        status      – Response status code
        user        – Username, or ``None`` for anonymous requests
        duration_ms – Round-trip duration in milliseconds (2 dp)
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.monotonic()
        try:
            response = self.get_response(request)
            duration_ms = round((time.monotonic() - start) * 1000, 2)

            user = getattr(request, "user", None)
            logger.info(
                "http_request",
                method=request.method,
                path=request.get_full_path(),
                status=response.status_code,
                user=user.get_username() if user is not None and user.is_authenticated else None,
                duration_ms=duration_ms,
            )
            response["X-Request-ID"] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
