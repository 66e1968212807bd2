"""
Observability Infrastructure

Structured logging with correlation tracking for the crop domain.
"""

import contextvars
import logging
import sys
import uuid
from typing import Any

import structlog

from .config import Settings, settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")

        if correlation_id:
            event_dict["correlation_id"] = correlation_id

        return event_dict


def build_processors(config: Settings) -> list[Any]:
    """Build the structlog processor chain for the given settings."""
    processors: list[Any] = [structlog.contextvars.merge_contextvars]

    if config.LOG_CORRELATION_ID:
        processors.append(CorrelationIdProcessor())

    processors.extend(
        [
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
        ]
    )

    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=config.ENVIRONMENT == "local")
        )

    return processors


def setup_structured_logging(config: Settings | None = None) -> None:
    """Configure structured logging with JSON output and correlation tracking."""
    config = config or settings
    log_level = config.log_level_number

    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id_var.get("")


def clear_correlation_id() -> None:
    """Reset the correlation ID for the current context."""
    correlation_id_var.set("")
