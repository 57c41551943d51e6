"""
Structured logging configuration for the credit engine.

All logs are JSON-formatted with these standard fields:
- timestamp: ISO 8601 timestamp
- event: The log event name (first positional argument)
- service: The configured service name
- request_id: UUID of the embedding service's request (when set)

The point lookup functions never log; only CreditCalculator emits events.
"""
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Optional

import structlog

from credit_engine.config import settings

# Context variable for the embedding service's request id
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def add_context_vars(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that adds the request id and service name to log entries."""
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    event_dict.setdefault("service", settings.service_name)
    return event_dict


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with JSON output and context processors."""
    level = (level or settings.log_level).upper()
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            add_context_vars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def set_request_context(request_id: str) -> None:
    """Set the request context for logging."""
    request_id_ctx.set(request_id)


def clear_request_context() -> None:
    """Clear the request context after request completion."""
    request_id_ctx.set("")


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())
