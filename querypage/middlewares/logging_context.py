"""
Middleware that scopes the log context to one HTTP request.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from querypage.logging import clear_log_context, logger, set_log_context


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Put ``endpoint`` and ``method`` into the log context for the request.

    Handlers may add their own fields with ``set_log_context``. The
    context is cleared once the response is produced, also when the
    handler raised.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        set_log_context(endpoint=request.url.path, method=request.method)
        try:
            response = await call_next(request)
            logger.debug(f"Responded {response.status_code}")
            return response
        finally:
            clear_log_context()
