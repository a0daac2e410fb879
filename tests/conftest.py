# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Replaces MongoDB with mongomock
# - Provides TestClient fixtures for development and production mode
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("JWT_SECRET", "test-secret-key-0123456789")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB", "playerdex_test")

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from lib.mongo_client import MongoConnection


TEST_SECRET = "test-secret-key-0123456789"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Development-mode settings (stack traces included in errors)."""
    return Settings(
        ENVIRONMENT="development",
        JWT_SECRET=TEST_SECRET,
        MONGODB_DB="playerdex_test",
        CORS_ORIGINS="http://localhost:5173",
        CORS_ROOT_DOMAIN="ingthing.co.uk",
    )


@pytest.fixture
def production_settings():
    """Production-mode settings (no stack traces in errors)."""
    return Settings(
        ENVIRONMENT="production",
        JWT_SECRET=TEST_SECRET,
        MONGODB_DB="playerdex_test",
    )


@pytest.fixture
def connection(settings):
    """An open MongoConnection backed by mongomock."""
    conn = MongoConnection.from_settings(settings, client_factory=mongomock.MongoClient)
    conn.connect()
    yield conn
    conn.close()


@pytest.fixture
def app(settings, connection):
    return create_app(settings, connection)


@pytest.fixture
def client(app):
    """TestClient with lifespan (startup/shutdown) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def production_client(production_settings):
    conn = MongoConnection.from_settings(production_settings, client_factory=mongomock.MongoClient)
    with TestClient(create_app(production_settings, conn)) as test_client:
        yield test_client


@pytest.fixture
def player_payload():
    """A complete, valid player body."""
    return {
        "name": "Javier Zanetti",
        "position": "Defender",
        "birthdate": "1973-08-10",
        "games_played": 615,
        "goals": 12,
        "assists": 0,
        "joining_date": "1995-07-01",
        "leaving_date": "2014-06-30",
        "image": "https://example.com/zanetti.webp",
    }


@pytest.fixture
def registered_user(client):
    """Register alice/secret and return the issued token pair."""
    response = client.post(
        "/api/auth/register",
        json={"username": "alice", "password": "secret", "email": "alice@example.com"},
    )
    assert response.status_code == 201
    return response.json()
