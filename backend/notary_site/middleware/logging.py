"""Access log for every HTTP request: method, path, status and duration."""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("notary_site.access")

_QUIET_PATHS = {"/health", "/health/"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _QUIET_PATHS:
            return await call_next(request)
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level,
            "%s %s -> %d (%.1fms) client=%s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            client_ip,
        )
        return response
