# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Registration, login and token refresh.
#
# Tokens are stateless: logout has nothing to revoke and simply
# acknowledges, and the client discards its tokens.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, status

from app.auth.dependencies import get_current_username
from app.auth.models import LoginRequest, MessageResponse, RefreshRequest, TokenPair
from app.auth.tokens import create_access_token, create_refresh_token, verify_refresh_token
from app.config import Settings
from app.dependencies import CredentialServiceDep, SettingsDep
from app.exceptions import NotFoundError, UnauthorizedError
from core.models.credential import CredentialResponse, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _issue_tokens(username: str, settings: Settings) -> TokenPair:
    return TokenPair(
        access_token=create_access_token(username, settings),
        refresh_token=create_refresh_token(username, settings),
    )


@router.post(
    "/register",
    response_model=TokenPair,
    status_code=status.HTTP_201_CREATED,
)
def register(
    request: RegisterRequest,
    credentials: CredentialServiceDep,
    settings: SettingsDep,
):
    """
    Register a new user and log them in.

    Raises:
        409: If the username is already taken
    """
    credential = credentials.create_credential(request)
    return _issue_tokens(credential["username"], settings)


@router.post("/login", response_model=TokenPair)
def login(
    request: LoginRequest,
    credentials: CredentialServiceDep,
    settings: SettingsDep,
):
    """
    Exchange a username and password for a token pair.

    Raises:
        401: If the username or password is wrong
    """
    credential = credentials.authenticate(request.username, request.password)
    logger.info(f"User logged in: {credential['username']}")
    return _issue_tokens(credential["username"], settings)


@router.post("/refresh", response_model=TokenPair)
async def refresh(settings: SettingsDep, request: RefreshRequest | None = None):
    """
    Exchange a refresh token for a new access token and refresh token.

    Raises:
        401: If the refresh token is missing, invalid or expired
    """
    if request is None or not request.refresh_token:
        raise UnauthorizedError()

    payload = verify_refresh_token(request.refresh_token, settings)
    if payload is None:
        raise UnauthorizedError()

    return _issue_tokens(payload["username"], settings)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=CredentialResponse)
def me(
    credentials: CredentialServiceDep,
    username: str = Depends(get_current_username),
):
    """
    Get the current user's stored profile (without the password hash).

    Raises:
        401: If not authenticated
        404: If the user was removed after the token was issued
    """
    credential = credentials.find_by_username(username)
    if credential is None:
        raise NotFoundError("User not found")
    return credential
