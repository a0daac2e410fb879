#!/usr/bin/env python3
# =============================================================================
# scripts/view_players.py - Print All Players
# =============================================================================
# Usage:
#   poetry run python scripts/view_players.py
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.config import get_settings
from core.services.player_service import PlayerService
from lib.mongo_client import MongoConnection, MongoConnectionError


def main() -> int:
    try:
        with MongoConnection.from_settings(get_settings()) as connection:
            players = PlayerService(connection.database).list_players()
    except MongoConnectionError as e:
        print(f"Error: {e}")
        return 1

    print(f"Players ({len(players)}):")
    for player in players:
        print(f"  {player['_id']}  {player['name']:<24} {player['position']:<12} "
              f"{player['games_played']} games, {player['goals']} goals")
    return 0


if __name__ == "__main__":
    sys.exit(main())
