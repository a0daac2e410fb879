# =============================================================================
# app/main.py - FastAPI Application Assembly
# =============================================================================
# Builds the PlayerDex API: middleware, routers and error handlers.
#
# Usage:
#   poetry run python -m app.server          # HTTP/HTTPS bootstrap
#   poetry run uvicorn app.main:app --reload # development
#
# Assembly order matters:
#   CORS -> error boundary -> routers -> not-found default -> error handlers
# =============================================================================

import logging
from contextlib import asynccontextmanager

from bson.errors import InvalidId
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import routes as auth_routes
from app.config import Settings, get_settings
from app.exceptions import PlayerDexException, handle_error, route_not_found
from app.middleware import ErrorBoundaryMiddleware
from app.routers import health, players
from core.services import CredentialService
from lib.mongo_client import MongoConnection

logger = logging.getLogger(__name__)

# Exception classes answered by the error pipeline from inside the router.
# Anything else is caught by ErrorBoundaryMiddleware.
HANDLED_EXCEPTIONS = (
    PlayerDexException,
    RequestValidationError,
    ValidationError,
    InvalidId,
    DuplicateKeyError,
    StarletteHTTPException,
)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Settings, connection: MongoConnection | None = None) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings: Configuration for this app instance
        connection: Database connection to use; built from settings if omitted.
            It is opened (if needed) on startup and closed on shutdown.
    """
    configure_logging(settings)
    connection = connection or MongoConnection.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: open the database connection, create indexes
        - Shutdown: close the connection
        """
        logger.info(f"Starting PlayerDex API in {settings.ENVIRONMENT} mode")
        logger.info(f"CORS origins: {settings.cors_origins_list}")
        connection.connect()
        CredentialService(connection.database).ensure_indexes()

        yield

        logger.info("Shutting down PlayerDex API")
        connection.close()

    app = FastAPI(
        title="PlayerDex API",
        description="Football player records and username-based authentication.",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Players", "description": "List, create and replace player records"},
            {"name": "Auth", "description": "Registration, login and JWT refresh"},
            {"name": "Health", "description": "API health check"},
        ],
    )
    app.state.settings = settings
    app.state.mongo = connection

    # =========================================================================
    # Middleware
    # =========================================================================
    # add_middleware() wraps the current stack, so the last one added is
    # outermost. CORS goes last so error responses still get CORS headers.

    app.add_middleware(ErrorBoundaryMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(players.router, prefix="/api/players", tags=["Players"])
    app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    # No route matched: raise a 404 into the same handlers as everything else
    app.router.default = route_not_found

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    for exc_class in HANDLED_EXCEPTIONS:
        app.add_exception_handler(exc_class, handle_error)

    return app


app = create_app(get_settings())
