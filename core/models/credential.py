# =============================================================================
# core/models/credential.py - Credential Schemas
# =============================================================================
# - RegisterRequest: registration payload; extra fields are kept
# - CredentialResponse: a stored credential without its password hash
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Registration payload.

    Only username and password are required. Any other fields the client
    sends (e.g. email, display_name) are stored alongside them, except
    `_id`, which the store always assigns.
    """

    model_config = ConfigDict(extra="allow")

    username: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Unique login name"
    )

    password: str = Field(
        ...,
        min_length=1,
        description="Plain-text password; stored only as a bcrypt hash"
    )


class CredentialResponse(BaseModel):
    """A stored credential as returned to clients."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned credential id")

    username: str = Field(..., description="Unique login name")
