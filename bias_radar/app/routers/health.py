"""
Health endpoint with component checks for monitoring.

Returns 200 when all components are healthy or degraded, 503 when any
component check fails.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bias_radar import __version__
from bias_radar.app.core.config import get_settings
from bias_radar.app.core.logging import get_logger
from bias_radar.app.services.session_store import get_session_store
from bias_radar.app.web import TEMPLATES_DIR

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


def check_analysis_settings() -> Dict[str, Any]:
    """
    Check that the analysis settings load and validate.

    Returns:
        Dict with status, message, and the effective delay
    """
    try:
        settings = get_settings()
        return {
            "status": "healthy",
            "message": "Analysis settings loaded",
            "delay_seconds": settings.analysis_delay_seconds,
        }
    except Exception as exc:
        logger.error("health_check_analysis_settings_failed", error=str(exc))
        return {
            "status": "unhealthy",
            "message": "Analysis settings are invalid",
            "error": str(exc)
        }


def check_templates() -> Dict[str, Any]:
    """
    Check that the page template is present.

    Returns:
        Dict with status, message, and template path
    """
    template_path = TEMPLATES_DIR / "index.html"
    if template_path.exists():
        return {
            "status": "healthy",
            "message": "Page template found",
            "path": str(template_path)
        }
    return {
        "status": "unhealthy",
        "message": "Page template not found",
        "path": str(template_path)
    }


def check_session_store() -> Dict[str, Any]:
    """
    Check session store capacity.

    Returns:
        Dict with status, message, and session counts
    """
    try:
        store = get_session_store()
    except Exception as exc:
        logger.error("health_check_session_store_failed", error=str(exc))
        return {
            "status": "unhealthy",
            "message": "Session store unavailable",
            "error": str(exc)
        }

    active = len(store)
    if active >= store.max_sessions:
        return {
            "status": "warning",
            "message": "Session store is full, least recently used sessions are being evicted",
            "active_sessions": active,
            "max_sessions": store.max_sessions
        }
    return {
        "status": "healthy",
        "message": "Session store available",
        "active_sessions": active,
        "max_sessions": store.max_sessions
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> JSONResponse:
    """
    Health check endpoint.

    Returns 200 when no component is unhealthy, 503 otherwise.
    Includes checks for: analysis settings, page template, session store.
    """
    start_time = datetime.now(timezone.utc)

    settings_check = check_analysis_settings()
    templates_check = check_templates()
    sessions_check = check_session_store()

    checks = [settings_check, templates_check, sessions_check]
    unhealthy_checks = [c for c in checks if c.get("status") == "unhealthy"]
    warning_checks = [c for c in checks if c.get("status") == "warning"]

    if unhealthy_checks:
        overall_status = "unhealthy"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif warning_checks:
        overall_status = "degraded"
        status_code = status.HTTP_200_OK
    else:
        overall_status = "healthy"
        status_code = status.HTTP_200_OK

    end_time = datetime.now(timezone.utc)
    response_time_ms = (end_time - start_time).total_seconds() * 1000

    response_data = {
        "status": overall_status,
        "timestamp": end_time.isoformat(),
        "response_time_ms": round(response_time_ms, 2),
        "version": {
            "app": __version__,
            "python": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        },
        "components": {
            "analysis_settings": settings_check,
            "templates": templates_check,
            "session_store": sessions_check
        }
    }

    logger.info(
        "health_check_completed",
        overall_status=overall_status,
        response_time_ms=response_time_ms,
        unhealthy_count=len(unhealthy_checks),
        warning_count=len(warning_checks)
    )

    return JSONResponse(
        status_code=status_code,
        content=response_data
    )
