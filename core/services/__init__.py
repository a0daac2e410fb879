# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .credential_service import CredentialService, public_credential
from .player_service import PlayerService

__all__ = [
    "CredentialService",
    "PlayerService",
    "public_credential",
]
