# =============================================================================
# app/middleware/error_boundary.py - Error Boundary Middleware
# =============================================================================
# Last line of defence for request handling. Registered just inside CORS so
# error responses still carry CORS headers.
# =============================================================================

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.exceptions import error_response


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """
    Catch errors the registered exception handlers don't cover.

    Without this, an unexpected exception raised while awaiting a handler
    reaches the server's last-resort handler and is re-raised. Here it is
    answered with the same envelope as every other error.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(request, exc)
