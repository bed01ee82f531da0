"""Structured logging configuration.

SDK events go through structlog into the standard ``logging`` tree under
``blockfrost_sdk``. That logger carries a ``NullHandler``, so nothing is
printed until the host application configures logging or calls
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.typing import FilteringBoundLogger

LOGGER_NAME = "blockfrost_sdk"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class _SDKStreamHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`; replaced on reconfiguration."""


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for applications embedding the SDK.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Render JSON lines instead of the colored console format.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    sdk_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(sdk_logger.handlers):
        if isinstance(handler, _SDKStreamHandler):
            sdk_logger.removeHandler(handler)
    handler = _SDKStreamHandler(output)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(level)


def reset_logging() -> None:
    """Undo :func:`configure_logging`, returning the SDK to silent defaults."""
    structlog.reset_defaults()
    sdk_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(sdk_logger.handlers):
        if isinstance(handler, _SDKStreamHandler):
            sdk_logger.removeHandler(handler)
    sdk_logger.setLevel(logging.NOTSET)


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Return a structlog logger writing to the stdlib logger ``name``.

    ``name`` should sit under ``blockfrost_sdk`` so the package's handlers apply.
    """
    logger: FilteringBoundLogger = structlog.wrap_logger(logging.getLogger(name or LOGGER_NAME))
    return logger
