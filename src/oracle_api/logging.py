"""Structured logging for the oracle API, built on structlog.

Request handlers bind per-request context (scope, interval) through
structlog.contextvars so every event logged while serving a query carries it.
"""

import logging
import os

import structlog


def setup_logging(log_level: str = "INFO") -> None:
    """Route this service's structlog events and uvicorn/stdlib records through one handler.

    Histogram queries log one completion event each, with bucket count and
    timing, and store failures log the store's error reason. Under LOG_FORMAT=json
    those events are machine-parseable; "console" (default) is for development.
    Timestamps are UTC to line up with the UTC bounds sent to the store.
    """
    log_format = os.environ.get("LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # httpx logs every request at INFO; the store client logs its own events
    logging.getLogger("httpx").setLevel(logging.WARNING)


def bind_request_context(**values: object) -> None:
    """Replace the per-request log context with the given key/values."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
