# =============================================================================
# core/models/player.py - Player Schemas
# =============================================================================
# These models define the API contract for player operations:
# - PlayerBase: The nine required fields shared by every schema
# - PlayerCreate: Input for POST /api/players
# - PlayerUpdate: Input for PUT /api/players/{id} (full replace)
# - PlayerResponse: A stored player, including its id
#
# Dates are kept as the strings clients send (e.g. "1995-07-01").
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class PlayerBase(BaseModel):
    """
    Fields every player record carries. All are required.

    Example:
        {
            "name": "Javier Zanetti",
            "position": "Defender",
            "birthdate": "1973-08-10",
            "games_played": 615,
            "goals": 12,
            "assists": 0,
            "joining_date": "1995-07-01",
            "leaving_date": "2014-06-30",
            "image": "https://example.com/zanetti.webp"
        }
    """

    name: str = Field(..., description="Player's full name")

    position: str = Field(..., description="Playing position (e.g. Defender)")

    birthdate: str = Field(..., description="Date of birth")

    games_played: int = Field(..., description="Appearances for the club")

    goals: int = Field(..., description="Goals scored")

    assists: int = Field(..., description="Assists provided")

    joining_date: str = Field(..., description="Date the player joined")

    leaving_date: str = Field(..., description="Date the player left")

    image: str = Field(..., description="URL of the player's picture")


class PlayerCreate(PlayerBase):
    """Schema for creating a player."""


class PlayerUpdate(PlayerBase):
    """
    Schema for replacing a player.

    Every mutable field must be supplied; missing fields are a
    validation error rather than left unchanged.
    """


class PlayerResponse(PlayerBase):
    """
    Schema for returning a stored player.

    The store-assigned ObjectId is exposed as the string `_id`.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned player id")
