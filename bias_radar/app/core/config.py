"""
Configuration module for the Bias Radar application.

This module provides the Settings class that loads and validates environment
variables. It uses Pydantic BaseSettings for type validation and default value
handling.
"""

from __future__ import annotations

import sys

from pydantic import Field, ValidationError, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a working default so the application starts with an empty
    environment; tests override individual values through the constructor or
    monkeypatched environment variables.
    """

    app_title: str = Field(
        default="Bias Radar",
        description="Title shown in the page header and the OpenAPI schema"
    )

    # Analysis Simulator Configuration
    analysis_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        le=30.0,
        description="Fixed artificial delay applied to every simulated article analysis"
    )
    summary_max_characters: int = Field(
        default=120,
        ge=20,
        le=1000,
        description="Number of leading characters of the article kept in the summary"
    )
    emotional_language_limit: int = Field(
        default=4,
        ge=1,
        le=15,
        description="Maximum number of emotional words reported per article"
    )

    # Session Configuration
    session_cookie_name: str = Field(
        default="bias_radar_session",
        description="Cookie carrying the id of the in-memory comparison session"
    )
    max_sessions: int = Field(
        default=1000,
        ge=1,
        le=100000,
        description="Upper bound on in-memory sessions; least recently used are evicted"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (production) instead of the console renderer"
    )

    # CORS Configuration
    frontend_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated list of allowed frontend origins"
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse frontend_origins into a list of allowed CORS origins."""
        return [origin.strip() for origin in self.frontend_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """
    Get application settings instance.

    Returns:
        Settings: Validated application settings

    Raises:
        ValidationError: If environment variables are invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        print(f"Configuration validation error: {e}", file=sys.stderr)
        raise


def validate_env_cli() -> None:
    """
    CLI command to validate environment configuration.

    This function can be called via: python -m bias_radar.app.core.config --check
    """
    try:
        settings = get_settings()
        print("✅ Environment configuration is valid")
        print(f"Analysis delay: {settings.analysis_delay_seconds} seconds")
        print(f"Summary length: {settings.summary_max_characters} characters")
        print(f"Max sessions: {settings.max_sessions}")
        print(f"Log level: {settings.log_level} ({'json' if settings.log_json else 'console'})")
    except ValidationError as e:
        print("❌ Environment configuration is invalid:")
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            print(f"  - {field}: {error['msg']}")
        sys.exit(1)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Configuration validation utility")
    parser.add_argument("--check", action="store_true", help="Validate environment configuration")

    args = parser.parse_args()

    if args.check:
        validate_env_cli()
    else:
        parser.print_help()
