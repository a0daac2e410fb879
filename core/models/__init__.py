# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - player.py: Player create/update/response schemas
# - credential.py: Registration payload and public credential schema
#
# These models define the "contract" between API and clients.
# =============================================================================

from .credential import CredentialResponse, RegisterRequest
from .player import PlayerBase, PlayerCreate, PlayerResponse, PlayerUpdate

__all__ = [
    # Credential
    "CredentialResponse",
    "RegisterRequest",
    # Player
    "PlayerBase",
    "PlayerCreate",
    "PlayerResponse",
    "PlayerUpdate",
]
