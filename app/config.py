# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   app = create_app(settings)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings object is passed explicitly into create_app(); the error
# pipeline reads it from app.state rather than from a module global.
# =============================================================================

import re
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEV_JWT_SECRET = "dev-secret-key-change-in-production"

DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:3000",
    "https://localhost:3000",
    "http://localhost:3001",
    "https://localhost:3001",
    "http://localhost:5173",
    "https://localhost:5173",
])


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment (production hides stack traces)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # MongoDB Configuration
    # -------------------------------------------------------------------------

    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )

    MONGODB_DB: str = Field(
        default="playerdex",
        min_length=1,
        description="Database name holding the players and auth collections"
    )

    MONGODB_TIMEOUT_MS: int = Field(
        default=5000,
        ge=100,
        description="Server selection timeout for the MongoDB client"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    JWT_SECRET: str = Field(
        default=DEV_JWT_SECRET,
        min_length=16,
        description="Secret key for signing access and refresh tokens"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="JWT signing algorithm"
    )

    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=15,
        ge=1,
        description="Lifetime of access tokens"
    )

    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(
        default=7,
        ge=1,
        description="Lifetime of refresh tokens"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    # Comma-separated string that gets parsed
    CORS_ORIGINS: str = Field(
        default=DEFAULT_CORS_ORIGINS,
        description="Explicitly allowed CORS origins (comma-separated)"
    )

    CORS_ROOT_DOMAIN: str | None = Field(
        default="ingthing.co.uk",
        description="Root domain whose subdomains are all allowed by CORS"
    )

    FRONTEND_URL: str | None = Field(
        default=None,
        description="Extra frontend origin appended to the allow-list"
    )

    # -------------------------------------------------------------------------
    # TLS
    # -------------------------------------------------------------------------

    SSL_KEY_PATH: str = Field(
        default="certs/key.pem",
        description="TLS private key; HTTPS is used when both files exist"
    )

    SSL_CERT_PATH: str = Field(
        default="certs/cert.pem",
        description="TLS certificate; HTTPS is used when both files exist"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _reject_dev_secret_in_production(self) -> "Settings":
        if self.ENVIRONMENT == "production" and self.JWT_SECRET == DEV_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set explicitly in production")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS into a list, appending FRONTEND_URL if set.

        Trailing slashes are stripped since browsers never send them.
        Example: "http://localhost:3000, https://myapp.com/" -> ["http://localhost:3000", "https://myapp.com"]
        """
        origins = [origin.strip().rstrip("/") for origin in self.CORS_ORIGINS.split(",")]
        if self.FRONTEND_URL:
            origins.append(self.FRONTEND_URL.strip().rstrip("/"))
        return [origin for origin in origins if origin]

    @property
    def cors_origin_regex(self) -> str | None:
        """
        Regex matching the root domain and any of its subdomains.

        Example: "ingthing.co.uk" matches https://ingthing.co.uk and
        https://interplayerdex.ingthing.co.uk but not https://evilingthing.co.uk
        """
        if not self.CORS_ROOT_DOMAIN:
            return None
        domain = re.escape(self.CORS_ROOT_DOMAIN.strip().lower())
        return rf"^https?://([a-zA-Z0-9-]+\.)*{domain}(:\d+)?$"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()
