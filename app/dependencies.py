# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The MongoConnection and Settings live on app.state; they are set once by
# create_app() and never read from module globals here.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request
from pymongo.database import Database

from app.config import Settings
from core.services import CredentialService, PlayerService
from lib.mongo_client import MongoConnection


def get_app_settings(request: Request) -> Settings:
    """Settings the app was assembled with."""
    return request.app.state.settings


def get_connection(request: Request) -> MongoConnection:
    return request.app.state.mongo


def get_database(connection: Annotated[MongoConnection, Depends(get_connection)]) -> Database:
    return connection.database


def get_player_service(database: Annotated[Database, Depends(get_database)]) -> PlayerService:
    return PlayerService(database)


def get_credential_service(database: Annotated[Database, Depends(get_database)]) -> CredentialService:
    return CredentialService(database)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ConnectionDep = Annotated[MongoConnection, Depends(get_connection)]
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]
CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]
