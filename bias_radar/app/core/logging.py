"""
Structured logging configuration for the Bias Radar application.

This module sets up structlog on top of the standard library logging module,
with correlation IDs for request tracing and either a JSON or a console
renderer.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict, WrappedLogger


def add_correlation_id(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if not already present.

    Request-scoped IDs bound by CorrelationIDMiddleware are merged first, so a
    fresh ID is only generated for events logged outside a request.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = str(uuid.uuid4())
    return event_dict


def configure_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to use JSON formatting (True for production, False for dev)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )
    logging.getLogger().setLevel(numeric_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if json_format:
        processors.extend([
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer()
        ])
    else:
        processors.extend([
            structlog.dev.ConsoleRenderer(colors=True)
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, correlation_id: Optional[str] = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance with optional correlation ID.

    The logger stays lazy until first use, so module-level loggers pick up
    the configuration applied later by configure_logging.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracing
        **initial_values: Context bound to every event, e.g. component

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    if correlation_id:
        initial_values["correlation_id"] = correlation_id

    return structlog.get_logger(name, **initial_values)


def generate_correlation_id() -> str:
    """Generate a new UUID-based correlation ID for request tracing."""
    return str(uuid.uuid4())


class CorrelationIDMiddleware:
    """
    ASGI middleware binding a correlation ID to all log events of a request.

    The ID is taken from the request header when present, generated otherwise,
    and echoed back in the response headers.
    """

    def __init__(self, app: Any, header_name: str = "X-Correlation-ID"):
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = None
        for name, value in scope.get("headers", []):
            if name.decode().lower() == self.header_name.lower():
                correlation_id = value.decode()
                break

        if not correlation_id:
            correlation_id = generate_correlation_id()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        async def send_with_correlation_id(message: Dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((
                    self.header_name.encode(),
                    correlation_id.encode()
                ))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_correlation_id)


def log_exception(logger: structlog.stdlib.BoundLogger, exception: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log an exception with proper context and correlation ID.

    Args:
        logger: Structured logger instance
        exception: Exception to log
        context: Additional context to include in log
    """
    log_context: Dict[str, Any] = {"exc_info": exception}
    if context:
        log_context.update(context)

    logger.error(
        "exception_occurred",
        exception_type=type(exception).__name__,
        exception_message=str(exception),
        **log_context
    )


def log_request_start(logger: structlog.stdlib.BoundLogger, method: str, path: str, **kwargs: Any) -> None:
    """Log the start of a request with correlation ID."""
    logger.info(
        "request_started",
        http_method=method,
        path=path,
        **kwargs
    )


def log_request_end(logger: structlog.stdlib.BoundLogger, method: str, path: str, status_code: int, duration_ms: float, **kwargs: Any) -> None:
    """Log the end of a request with timing and status."""
    logger.info(
        "request_completed",
        http_method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
        **kwargs
    )
