import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("fleetadmin.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, latency and client IP of every request"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "-"
        message = "%s %s %d %.1fms %s"
        args = (request.method, request.url.path, response.status_code, latency_ms, client_ip)

        if response.status_code >= 500:
            logger.error(message, *args)
        elif response.status_code >= 400:
            logger.warning(message, *args)
        else:
            logger.info(message, *args)

        return response
