from __future__ import annotations

import logging as py_logging
from typing import List, Optional

import structlog

from datapoint_client.config import LoggingConfig, app_config

_configured = False


def _processors(config: LoggingConfig) -> List:
    renderer = structlog.processors.JSONRenderer() if config.json else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(config: Optional[LoggingConfig] = None, *, force: bool = False) -> None:
    """Configure structlog for applications that want the client's pipeline.

    Never called on import. Runs once per process unless ``force`` is set.
    Loggers are not cached, so a forced reconfigure also applies to the
    module loggers already handed out.
    """
    global _configured
    if _configured and not force:
        return

    config = config or app_config.logging
    level = getattr(py_logging, str(config.level).upper(), py_logging.INFO)

    structlog.configure(
        processors=_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    py_logging.basicConfig(level=level, format="%(message)s")
    _configured = True


def get_logger(name: str = __name__):
    """Return a lazy structlog logger bound to whatever configuration is active."""
    return structlog.get_logger(name)
