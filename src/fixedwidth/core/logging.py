"""structlog configuration for fixedwidth.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (FIXEDWIDTH_LOG_JSON_OUTPUT=true): structured JSON lines to stderr

The library itself only emits DEBUG events (schema resolution, layout
binding); applications call ``configure_logging`` to see them.
"""

from __future__ import annotations

import logging
import sys

import structlog

from fixedwidth.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure structlog processors and output routing.

    Args:
        settings: Source of the level and renderer choice. Defaults to
            ``AppSettings()`` (environment driven).
    """
    if settings is None:
        settings = AppSettings()

    level = logging.getLevelName(settings.logging.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.logging.json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    fw_logger = logging.getLogger("fixedwidth")
    fw_logger.handlers.clear()
    fw_logger.addHandler(handler)
    fw_logger.setLevel(level)
    fw_logger.propagate = False
