# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Username/password registration with JWT access and refresh tokens.
#
# Usage:
#   from app.auth import get_current_username
#
#   @router.get("/protected")
#   def protected(username: str = Depends(get_current_username)):
#       return {"username": username}
# =============================================================================

from app.auth.dependencies import get_current_username
from app.auth.models import LoginRequest, MessageResponse, RefreshRequest, TokenPair

__all__ = [
    "get_current_username",
    "LoginRequest",
    "MessageResponse",
    "RefreshRequest",
    "TokenPair",
]
