# =============================================================================
# core/services/credential_service.py - Credential Store
# =============================================================================
# Handles credential persistence in the "auth" collection.
# Usernames are unique (enforced by an index); passwords are stored as
# bcrypt hashes and never leave this service.
# =============================================================================

import logging
from typing import Any

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from lib.passwords import hash_password, verify_password
from app.exceptions import ConflictError, UnauthorizedError
from core.models.credential import RegisterRequest
from lib.utils import serialize_document

logger = logging.getLogger(__name__)

CREDENTIALS_COLLECTION = "auth"

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


def public_credential(document: dict[str, Any] | None) -> dict[str, Any] | None:
    """Serialize a credential document without its password hash."""
    if document is None:
        return None
    result = serialize_document(document)
    result.pop("password_hash", None)
    return result


class CredentialService:
    """
    Service for credential CRUD and password checks.

    Bound to a Database handle owned by the process bootstrap.
    """

    def __init__(self, database: Database):
        self.collection = database[CREDENTIALS_COLLECTION]

    def ensure_indexes(self) -> None:
        """Create the unique username index (idempotent)."""
        self.collection.create_index("username", unique=True)

    def create_credential(self, data: RegisterRequest) -> dict[str, Any]:
        """
        Register a new credential.

        Returns:
            The stored credential without its password hash

        Raises:
            ConflictError: If the username is already taken
        """
        document = data.model_dump(exclude={"password"})
        # The id is always assigned by the store
        document.pop("_id", None)
        document["password_hash"] = hash_password(data.password)

        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as e:
            key_value = (e.details or {}).get("keyValue") or {"username": data.username}
            raise ConflictError(key_value) from e

        document["_id"] = result.inserted_id
        logger.info(f"Registered user: {data.username}")
        return public_credential(document)

    def find_by_username(self, username: str) -> dict[str, Any] | None:
        return public_credential(self.collection.find_one({"username": username}))

    def authenticate(self, username: str, password: str) -> dict[str, Any]:
        """
        Check a username/password pair.

        Raises:
            UnauthorizedError: If the user doesn't exist or the password is wrong
        """
        document = self.collection.find_one({"username": username})
        if document is None or not verify_password(password, document.get("password_hash", "")):
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
        return public_credential(document)
