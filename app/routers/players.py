# =============================================================================
# app/routers/players.py - Player CRUD Endpoints
# =============================================================================
# Each endpoint is a single store call: validate the body, hand it to
# PlayerService, return the stored record. Errors are raised, never
# answered here; the error pipeline builds the response.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import PlayerServiceDep
from core.models.player import PlayerCreate, PlayerResponse, PlayerUpdate

router = APIRouter()


@router.get("", response_model=list[PlayerResponse])
def list_players(players: PlayerServiceDep):
    """List every player."""
    return players.list_players()


@router.post("", response_model=PlayerResponse)
def create_player(request: PlayerCreate, players: PlayerServiceDep):
    """
    Create a player.

    All nine player fields are required; missing or mistyped fields
    are rejected with a 400 listing every problem.
    """
    return players.create_player(request)


@router.put("/{player_id}", response_model=PlayerResponse)
def update_player(player_id: str, request: PlayerUpdate, players: PlayerServiceDep):
    """
    Replace all fields of an existing player.

    Raises:
        400: If player_id is not a valid id
        404: If no player has that id (nothing is created)
    """
    return players.replace_player(player_id, request)
