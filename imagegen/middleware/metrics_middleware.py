"""
HTTP request metrics.

Every request except the scrape itself is counted and timed, labelled by
method, route template and status. IDs in the path are collapsed so each
route yields one series.
"""
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from imagegen.utils.metrics import http_requests_total, http_request_duration_seconds, errors_total

SKIPPED_PATHS = frozenset({"/metrics"})

_ID_SEGMENT = re.compile(
    r"/(?:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}|\d+)(?=/|$)",
    re.IGNORECASE
)


def normalize_path(path: str) -> str:
    """Replace UUID and numeric path segments with ``{id}``."""
    return _ID_SEGMENT.sub("/{id}", path)


def status_class(status_code: int) -> str:
    return f"{status_code // 100}xx"


class MetricsMiddleware(BaseHTTPMiddleware):
    
    async def dispatch(self, request: Request, call_next):
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)
        
        route = normalize_path(request.url.path)
        started = time.perf_counter()
        
        try:
            response = await call_next(request)
        except Exception:
            errors_total.labels(error_type="exception").inc()
            raise
        
        elapsed = time.perf_counter() - started
        http_requests_total.labels(method=request.method, path=route, status=response.status_code).inc()
        http_request_duration_seconds.labels(method=request.method, path=route).observe(elapsed)
        if response.status_code >= 400:
            errors_total.labels(error_type=status_class(response.status_code)).inc()
        
        return response
