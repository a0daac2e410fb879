# =============================================================================
# app/auth/tokens.py - Access / Refresh Token Issuer
# =============================================================================
# Signs short-lived access tokens and long-lived refresh tokens carrying only
# the username. Verification returns the decoded claims or None.
#
# There is no rotation, revocation or replay protection: a refresh token
# stays valid until it expires.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from app.config import Settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _create_token(username: str, token_type: str, lifetime: timedelta, settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "username": username,
        "type": token_type,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def _verify_token(token: str, token_type: str, settings: Settings) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"Token verification failed: {e}")
        return None

    if payload.get("type") != token_type or not payload.get("username"):
        logger.debug(f"Rejected token: expected type {token_type}")
        return None
    return payload


def create_access_token(username: str, settings: Settings) -> str:
    """Sign an access token valid for ACCESS_TOKEN_EXPIRE_MINUTES."""
    lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _create_token(username, ACCESS_TOKEN_TYPE, lifetime, settings)


def create_refresh_token(username: str, settings: Settings) -> str:
    """Sign a refresh token valid for REFRESH_TOKEN_EXPIRE_DAYS."""
    lifetime = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _create_token(username, REFRESH_TOKEN_TYPE, lifetime, settings)


def verify_access_token(token: str, settings: Settings) -> dict[str, Any] | None:
    return _verify_token(token, ACCESS_TOKEN_TYPE, settings)


def verify_refresh_token(token: str, settings: Settings) -> dict[str, Any] | None:
    return _verify_token(token, REFRESH_TOKEN_TYPE, settings)
