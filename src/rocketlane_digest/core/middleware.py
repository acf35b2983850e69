"""
Middleware components for request logging.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request with an ID and timing. Headers are never logged."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        client_ip = self._get_client_ip(request)

        with logger.contextualize(request_id=request_id):
            logger.info(f"Request started: {request.method} {request.url.path} from {client_ip}")

            try:
                response = await call_next(request)
            except Exception as e:
                process_time = round((time.time() - start_time) * 1000, 2)
                logger.error(
                    f"Request failed: {type(e).__name__}: {e} ({process_time} ms)"
                )
                raise

            process_time = round((time.time() - start_time) * 1000, 2)
            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"-> {response.status_code} ({process_time} ms)"
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
