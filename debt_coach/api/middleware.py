"""Per-request context: request id, latency metric and access log"""

import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from debt_coach.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("debt_coach.access")


def route_label(request: Request) -> str:
    """Route template (e.g. /api/debts) rather than the raw path, to bound label values"""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag the request with an id (the caller's X-Request-ID when supplied),
    echo it on the response, then record duration and an access log line.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        endpoint = route_label(request)
        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(elapsed)
        logger.info(
            "Request handled",
            extra={
                "request_id": request_id,
                "method": request.method,
                "endpoint": endpoint,
                "status": response.status_code,
                "duration_ms": round(elapsed * 1000, 2),
            },
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
