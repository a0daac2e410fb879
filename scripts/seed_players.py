#!/usr/bin/env python3
# =============================================================================
# scripts/seed_players.py - Insert Sample Players
# =============================================================================
# Inserts a couple of well-known players so a fresh database has data.
#
# Usage:
#   poetry run python scripts/seed_players.py
#
# Prerequisites:
#   - MongoDB must be reachable at MONGODB_URI (.env file)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.config import get_settings
from core.models.player import PlayerCreate
from core.services.player_service import PlayerService
from lib.mongo_client import MongoConnection, MongoConnectionError


SAMPLE_PLAYERS = [
    {
        "name": "Javier Zanetti",
        "position": "Defender",
        "birthdate": "1973-08-10",
        "games_played": 615,
        "goals": 12,
        "assists": 0,
        "joining_date": "1995-07-01",
        "leaving_date": "2014-06-30",
        "image": "https://media.gettyimages.com/id/100329136/photo/bayern-muenchen-v-inter-milan-uefa-champions-league-final.webp",
    },
    {
        "name": "Lothar Matthaus",
        "position": "Midfielder",
        "birthdate": "1961-03-21",
        "games_played": 115,
        "goals": 40,
        "assists": 0,
        "joining_date": "1988-07-01",
        "leaving_date": "1992-06-30",
        "image": "https://media.gettyimages.com/id/52934986/photo/matthaeus-juventus-turin-inter-mailand.webp",
    },
]


def main() -> int:
    try:
        with MongoConnection.from_settings(get_settings()) as connection:
            service = PlayerService(connection.database)
            for data in SAMPLE_PLAYERS:
                created = service.create_player(PlayerCreate(**data))
                print(f"Created: {created['name']} ({created['_id']})")
    except MongoConnectionError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
