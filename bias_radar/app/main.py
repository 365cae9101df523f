from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from bias_radar import __version__
from bias_radar.app.core.config import get_settings
from bias_radar.app.core.logging import (
    CorrelationIDMiddleware,
    configure_logging,
    get_logger,
    log_request_end,
    log_request_start,
)
from bias_radar.app.routers import analyze_router, health_router, web_router
from bias_radar.app.web import STATIC_DIR

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    settings = get_settings()
    configure_logging(log_level=settings.log_level, json_format=settings.log_json)
    logger.info("application_started", delay_seconds=settings.analysis_delay_seconds)
    yield
    logger.info("application_stopped")


settings = get_settings()
app = FastAPI(title=settings.app_title, version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    log_request_start(logger, request.method, request.url.path)
    response = await call_next(request)
    log_request_end(
        logger,
        request.method,
        request.url.path,
        response.status_code,
        round((time.perf_counter() - started) * 1000, 2),
    )
    return response


# Outermost, so request logs carry the correlation id.
app.add_middleware(CorrelationIDMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(web_router)
app.include_router(analyze_router)
app.include_router(health_router)
