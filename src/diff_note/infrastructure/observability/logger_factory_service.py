"""Structlog-based logging configuration with stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns a bound structlog logger
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from diff_note.infrastructure.configuration.logging_settings import LoggingSettings

_CONFIGURED = False

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by LOG_FORMAT (json|console) or APP_ENV.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    settings = settings or LoggingSettings()
    renderer = select_renderer(settings)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger pre-bound with the component name."""
    return structlog.get_logger().bind(component=component)


def select_renderer(settings: LoggingSettings) -> Any:
    """Choose renderer based on LOG_FORMAT or APP_ENV."""
    log_format = settings.log_format.lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)
    if settings.app_env.lower() in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
