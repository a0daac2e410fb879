# =============================================================================
# app/middleware/ - HTTP Middleware
# =============================================================================
# Cross-cutting request handling that sits around the routers:
# - error_boundary.py: turns any error that escapes the exception handlers
#   into the standard error envelope
# =============================================================================

from app.middleware.error_boundary import ErrorBoundaryMiddleware

__all__ = ["ErrorBoundaryMiddleware"]
