"""Request tracing middleware."""

import re
import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mediscan.api.error_handlers import generic_error_handler

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_INBOUND_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Scraped every few seconds; logged at debug only
QUIET_PATHS = frozenset({"/metrics", "/api/health"})


def resolve_request_id(request: Request) -> str:
    """Reuse a well-formed inbound X-Request-ID, otherwise mint a UUID4."""
    inbound = request.headers.get(REQUEST_ID_HEADER)
    if inbound and _INBOUND_ID.match(inbound):
        return inbound
    return str(uuid.uuid4())


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind request_id, method and path to every log line of a request.

    The id is echoed in the X-Request-ID response header, including on the
    500 envelope built here for unhandled errors. Query strings are never
    logged because /results carries symptom text there.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = resolve_request_id(request)
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )
        start = time.perf_counter()
        log("Request started")

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await generic_error_handler(request, exc)

            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
