# =============================================================================
# lib/mongo_client.py - MongoDB Connection Lifecycle
# =============================================================================
# This module owns the single MongoClient shared by the process.
# The server bootstrap creates one MongoConnection, opens it before serving,
# and closes it on shutdown. Stores receive the Database handle it exposes;
# nothing connects implicitly on import.
#
# Usage:
#   from lib.mongo_client import MongoConnection
#   connection = MongoConnection.from_settings(settings)
#   connection.connect()
#   players = connection.database["players"]
#   connection.close()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Callable

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.config import Settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class MongoConnectionError(Exception):
    """
    Error while opening or using the MongoDB connection.

    Carries an actionable suggestion alongside the failure.
    """

    def __init__(
        self,
        message: str,
        code: str = "MONGO_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class MongoConnection:
    """
    Explicit init/close lifecycle around a MongoClient.

    `client_factory` defaults to pymongo's MongoClient; tests pass
    mongomock.MongoClient instead.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        timeout_ms: int = 5000,
        client_factory: Callable[..., Any] = MongoClient,
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: MongoClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client_factory: Callable[..., Any] = MongoClient,
    ) -> MongoConnection:
        return cls(
            uri=settings.MONGODB_URI,
            db_name=settings.MONGODB_DB,
            timeout_ms=settings.MONGODB_TIMEOUT_MS,
            client_factory=client_factory,
        )

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> MongoConnection:
        """
        Open the client and verify the server answers a ping.

        Calling connect() on an open connection is a no-op.

        Raises:
            MongoConnectionError: If the server cannot be reached
        """
        if self._client is not None:
            return self

        try:
            client = self._client_factory(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            client.admin.command("ping")
        except PyMongoError as e:
            raise MongoConnectionError(
                message=f"Failed to connect to MongoDB: {e}",
                code="CONNECT_FAILED",
                suggestion="Check MONGODB_URI in your .env file and that the server is running",
            ) from e

        self._client = client
        logger.info(f"MongoDB connected (database: {self.db_name})")
        return self

    @property
    def database(self) -> Database:
        """
        The configured database handle.

        Raises:
            MongoConnectionError: If connect() has not been called
        """
        if self._client is None:
            raise MongoConnectionError(
                message="MongoDB connection is not open",
                code="NOT_CONNECTED",
                suggestion="Call connect() during startup before handling requests",
            )
        return self._client[self.db_name]

    def ping(self) -> bool:
        """Return True when the server answers, False otherwise."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        logger.info("MongoDB connection closed")

    def __enter__(self) -> MongoConnection:
        return self.connect()

    def __exit__(self, *exc_info) -> None:
        self.close()
