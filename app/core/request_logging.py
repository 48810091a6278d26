"""Per-request access logging."""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Awaitable, Callable
from contextvars import ContextVar

from fastapi import Request, Response

logger = logging.getLogger(__name__)

_request_id: ContextVar[str] = ContextVar("request_id", default="")
_counter = itertools.count(1)


def current_request_id() -> str:
    """Return the id of the request being served, or an empty string."""
    return _request_id.get()


def next_request_id() -> str:
    return f"req-{next(_counter)}"


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag the request with an id and log one line once it has been answered."""
    token = _request_id.set(next_request_id())
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "request completed %s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "response_time": elapsed_ms,
            },
        )
        return response
    finally:
        _request_id.reset(token)
