# =============================================================================
# app/server.py - Server Bootstrap
# =============================================================================
# Process entry point: opens the database, picks HTTP or HTTPS, and runs
# uvicorn.
#
# Usage:
#   poetry run python -m app.server
#   poetry run playerdex
#
# HTTPS is used when both SSL_KEY_PATH and SSL_CERT_PATH exist
# (defaults: certs/key.pem, certs/cert.pem; see scripts/generate_certs.py).
#
# Exit codes:
#   0 - clean shutdown
#   1 - startup failure or uncaught exception
# =============================================================================

import logging
import sys
from pathlib import Path

import uvicorn

from app.config import Settings, get_settings
from app.main import configure_logging, create_app
from lib.mongo_client import MongoConnection, MongoConnectionError

logger = logging.getLogger(__name__)


def resolve_tls_files(settings: Settings) -> tuple[str, str] | None:
    """Return (keyfile, certfile) when both exist, else None for plain HTTP."""
    key_path = Path(settings.SSL_KEY_PATH)
    cert_path = Path(settings.SSL_CERT_PATH)
    if key_path.is_file() and cert_path.is_file():
        return str(key_path), str(cert_path)
    return None


def _log_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    # The interpreter still exits with status 1 once the hook returns
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def main() -> None:
    """Start the server."""
    settings = get_settings()
    configure_logging(settings)
    sys.excepthook = _log_uncaught_exception

    connection = MongoConnection.from_settings(settings)
    try:
        connection.connect()
    except MongoConnectionError as e:
        logger.error(f"Server startup error: {e}")
        sys.exit(1)

    app = create_app(settings, connection)

    tls_files = resolve_tls_files(settings)
    protocol = "https" if tls_files else "http"
    logger.info(f"Server is running on {protocol}://localhost:{settings.API_PORT}")

    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        ssl_keyfile=tls_files[0] if tls_files else None,
        ssl_certfile=tls_files[1] if tls_files else None,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
