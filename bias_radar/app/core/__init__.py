"""
Core utilities for the Bias Radar application.

This module provides the foundation for configuration management and structured
logging across the application.
"""

from .config import Settings, get_settings, validate_env_cli
from .logging import (
    configure_logging,
    get_logger,
    generate_correlation_id,
    CorrelationIDMiddleware,
    log_exception,
    log_request_start,
    log_request_end,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "validate_env_cli",
    # Logging
    "configure_logging",
    "get_logger",
    "generate_correlation_id",
    "CorrelationIDMiddleware",
    "log_exception",
    "log_request_start",
    "log_request_end",
]
