# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request ID propagation and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

REQUEST_ID_HEADER = "X-Request-ID"

# Fixed path segments of the employee routes; anything else is an id or a
# search fragment.
KNOWN_SEGMENTS: set[str] = {
    "api", "v1", "employee", "search",
    "highestSalary", "topTenHighestEarningEmployeeNames",
}

SKIP_PATHS: tuple[str, ...] = ("/health", "/health/ready", "/metrics")


def normalize_path(path: str) -> str:
    """Collapse ids and search terms to ``{param}`` to bound label cardinality."""
    parts = path.strip("/").split("/")
    if parts == [""]:
        return "/"
    return "/" + "/".join(p if p in KNOWN_SEGMENTS else "{param}" for p in parts)


def record_request(method: str, path: str, status_code: int, duration: float) -> None:
    """Count one served request unless it hit an ops endpoint."""
    if path in SKIP_PATHS:
        return
    endpoint = normalize_path(path)
    status = str(status_code)
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
    REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)
    if status_code >= 400:
        HTTP_ERRORS.labels(method=method, endpoint=endpoint, status=status).inc()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Echo the caller's X-Request-ID, or mint one, on every response."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Time each request and hand the outcome to ``record_request``."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        record_request(
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
        )
        return response
