# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common helpers for moving documents between MongoDB and the API.
# =============================================================================

from typing import Any

from bson import ObjectId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def to_object_id(value: str | ObjectId) -> ObjectId:
    """
    Convert a string identifier to an ObjectId.

    Raises:
        bson.errors.InvalidId: If the value is not a 24-character hex string

    Example:
        oid = to_object_id("65a1f0c2e4b0a1b2c3d4e5f6")
    """
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


def serialize_document(document: dict[str, Any] | None) -> dict[str, Any] | None:
    """
    Make a MongoDB document JSON-friendly.

    Returns a copy with `_id` rendered as a string.
    """
    if document is None:
        return None
    result = dict(document)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return result
