# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Resolves the current user from an "Authorization: Bearer <access token>"
# header.
#
# Usage:
#   from app.auth import get_current_username
#
#   @router.get("/protected")
#   def protected(username: str = Depends(get_current_username)):
#       return {"username": username}
# =============================================================================

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.tokens import verify_access_token
from app.dependencies import SettingsDep
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401 envelope
security = HTTPBearer(auto_error=False)


def get_current_username(
    settings: SettingsDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """
    Extract and validate the username from an access token.

    Raises:
        UnauthorizedError: 401 if the token is missing, invalid, expired,
            or is a refresh token
    """
    if credentials is None:
        raise UnauthorizedError()

    payload = verify_access_token(credentials.credentials, settings)
    if payload is None:
        logger.warning("Rejected access token")
        raise UnauthorizedError("Invalid or expired token")

    return payload["username"]
