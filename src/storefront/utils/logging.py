"""Logging configuration for the storefront domain.

The level and output format are read from the environment first
(``LOG_LEVEL``, ``LOG_FORMAT``), then from the domain's
``[tool.protean.custom]`` settings (``log_level``, ``log_format``). With
neither set, the level follows ``PROTEAN_ENV``.
"""

import logging
import os
import sys

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def resolve_level(settings=None) -> str:
    settings = settings or {}
    env = os.getenv("PROTEAN_ENV", "development").lower()
    level = os.getenv("LOG_LEVEL") or settings.get("log_level") or _LEVELS_BY_ENV.get(env, "INFO")
    return level.upper()


def resolve_renderer(settings=None):
    """JSON lines when ``log_format`` is ``json``, human-readable console output otherwise."""
    settings = settings or {}
    log_format = (os.getenv("LOG_FORMAT") or settings.get("log_format") or "console").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(settings=None) -> None:
    level = resolve_level(settings)

    root_logger = logging.getLogger()
    root_logger.handlers = [logging.StreamHandler(sys.stdout)]
    root_logger.setLevel(level)
    logging.getLogger("protean").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            resolve_renderer(settings),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
