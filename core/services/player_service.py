# =============================================================================
# core/services/player_service.py - Player Store
# =============================================================================
# Handles player persistence in the "players" collection.
# Separates HTTP concerns from database logic: routes validate input with
# the Pydantic models and hand them to this service.
# =============================================================================

import logging
from typing import Any

from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.database import Database

from app.exceptions import InvalidIdentifierError, NotFoundError
from core.models.player import PlayerCreate, PlayerUpdate
from lib.utils import serialize_document, to_object_id

logger = logging.getLogger(__name__)

PLAYERS_COLLECTION = "players"


class PlayerService:
    """
    Service for player CRUD operations.

    Bound to a Database handle owned by the process bootstrap.
    """

    def __init__(self, database: Database):
        self.collection = database[PLAYERS_COLLECTION]

    def list_players(self) -> list[dict[str, Any]]:
        """Return every player, in insertion order."""
        return [serialize_document(doc) for doc in self.collection.find()]

    def create_player(self, data: PlayerCreate) -> dict[str, Any]:
        """
        Insert a new player.

        Returns:
            The stored player dict including its `_id`
        """
        document = data.model_dump()
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Created player: {result.inserted_id}")
        return serialize_document(document)

    def replace_player(self, player_id: str, data: PlayerUpdate) -> dict[str, Any]:
        """
        Replace all mutable fields of an existing player.

        Never creates a record.

        Raises:
            InvalidIdentifierError: If player_id isn't a valid ObjectId
            NotFoundError: If no player has that id
        """
        try:
            object_id = to_object_id(player_id)
        except (InvalidId, TypeError):
            raise InvalidIdentifierError("id", player_id)

        updated = self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": data.model_dump()},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise NotFoundError("Player not found")

        logger.info(f"Updated player: {player_id}")
        return serialize_document(updated)
