# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: MongoDB connection lifecycle (connect/close)
# - passwords.py: bcrypt password hashing
# - utils.py: ObjectId conversion and document serialization
#
# These modules hold no request or route logic; mongo_client reads only
# the Settings object from app.config.
# =============================================================================

from lib.mongo_client import MongoConnection, MongoConnectionError
from lib.passwords import hash_password, verify_password
from lib.utils import serialize_document, to_object_id

__all__ = [
    # MongoDB
    "MongoConnection",
    "MongoConnectionError",
    # Passwords
    "hash_password",
    "verify_password",
    # Utils
    "serialize_document",
    "to_object_id",
]
