"""
JSON Validator Backend — Request Counting Middleware
=====================================================

What:  Increments the HTTP request counter once per inbound request.
How:   Reads the counter set from app.state.metrics, the same object the
       route handlers receive through Depends(get_metrics).
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class MetricsMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.app.state.metrics.record_http_request()
        return await call_next(request)
