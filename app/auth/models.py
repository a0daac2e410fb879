# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for the /api/auth request and response bodies.
# Token fields use camelCase on the wire to match the existing frontend.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    """Body of POST /api/auth/refresh. A missing token is a 401, not a 400."""

    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str | None = Field(default=None, alias="refreshToken")


class TokenPair(BaseModel):
    """
    Access and refresh tokens issued on register, login and refresh.

    Example:
        {"accessToken": "eyJ...", "refreshToken": "eyJ..."}
    """

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")


class MessageResponse(BaseModel):
    message: str
