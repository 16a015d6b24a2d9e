"""Logging for perfpath.

Library modules hold ``logger = get_logger(__name__)`` and emit dotted
events with key/value context. Events are forwarded to stdlib ``logging``
under the ``perfpath`` logger, which carries only a NullHandler until the
host application (or a ``logging:`` block in perfpath.yaml) calls
configure_logging().

Levels:
    DEBUG: per-call diagnostics (interval found, buckets built, streak found)
    INFO: configuration loaded
    WARNING: input that degrades to a NaN result, buckets skipped
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

PACKAGE_LOGGER = "perfpath"

# Handlers added by configure_logging(), removed again by reset_logging()
_installed_handlers: list[logging.Handler] = []


class LoggingConfig(BaseModel):
    """Output settings applied by configure_logging()."""

    level: LogLevel = Field(
        default="WARNING",
        description="Minimum level written to stdout",
    )
    format: Literal["console", "json"] = Field(
        default="console",
        description="stdout rendering: key=value console lines or JSON",
    )
    file_path: Path | None = Field(
        default=None,
        description="Also write JSON lines to this rotating file",
    )
    file_level: LogLevel = Field(
        default="DEBUG",
        description="Minimum level written to the file",
    )
    max_file_size_mb: int = Field(default=10, description="File size in MB before rotation")
    backup_count: int = Field(default=3, description="Number of rotated files to keep")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Structured logger bound to the stdlib logger ``name``.

    Disabled levels are dropped before the event is built; enabled events
    become LogRecords whose ``extra`` holds the key/value context.

    Example:
        >>> logger = get_logger("perfpath.performance.drawdown")
        >>> logger.warning("drawdown.not_computable", periods=36)
    """
    return structlog.stdlib.BoundLogger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context={},
    )


def _formatter(renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
    )


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Attach stdout (and optional file) output to the ``perfpath`` logger.

    Replaces output installed by an earlier call. Records stop propagating
    to the root logger so host handlers do not print them twice.

    Args:
        config: Output settings, defaults to LoggingConfig()
    """
    if config is None:
        config = LoggingConfig()

    reset_logging()

    if config.format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    console = logging.StreamHandler(stream=sys.stdout)
    console.setLevel(config.level)
    console.setFormatter(_formatter(renderer))
    handlers: list[logging.Handler] = [console]
    level = getattr(logging, config.level)

    if config.file_path is not None:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(config.file_path),
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(config.file_level)
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(file_handler)
        level = min(level, getattr(logging, config.file_level))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in handlers:
        package_logger.addHandler(handler)
    _installed_handlers.extend(handlers)


def reset_logging() -> None:
    """Remove configured output; the package goes back to silent propagation."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
