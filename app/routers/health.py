# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides a health check endpoint for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import ConnectionDep, SettingsDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    database: str


@router.get("/health", response_model=HealthResponse)
def health_check(settings: SettingsDep, connection: ConnectionDep):
    """
    Health check endpoint.

    Reports "degraded" when the database doesn't answer a ping.
    """
    database_ok = connection.ping()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.ENVIRONMENT,
        database="healthy" if database_ok else "unreachable",
    )
