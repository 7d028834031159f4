"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from tennis_roster.utils.config import Settings, get_settings

_active_log_file: Path | None = None


def get_active_log_file() -> Path | None:
    """Return the path of the log file opened by the current process, if any."""
    return _active_log_file


def _open_file_handler(log_dir: Path, level: int) -> logging.FileHandler | None:
    """Open the per-process JSON-lines log file, or return None if the directory is unusable."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(
            f"Warning: Could not create log directory '{log_dir}': {e}. "
            "Falling back to stdout-only logging.",
            file=sys.stderr,
        )
        return None

    log_file = log_dir / f"tennis_roster_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        print(
            f"Warning: Could not open log file '{log_file}': {e}. File logging disabled.",
            file=sys.stderr,
        )
        return None

    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer())
    )
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the application.

    Records go to stdout (console or JSON renderer depending on ``log_format``)
    and, when the log directory is writable, to
    ``<log_dir>/tennis_roster_YYYYMMDD_HHMMSS.log`` as JSON lines.
    """
    global _active_log_file  # noqa: PLW0603

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    # Drop handlers from a previous call (pytest re-invokes the CLI in-process).
    for h in root.handlers[:]:
        root.removeHandler(h)

    console_renderer: Processor
    if settings.log_format == "json":
        console_renderer = structlog.processors.JSONRenderer()
    else:
        console_renderer = structlog.dev.ConsoleRenderer()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=console_renderer))
    root.addHandler(console_handler)

    file_handler = _open_file_handler(Path(settings.log_dir), level)
    if file_handler is not None:
        root.addHandler(file_handler)
        _active_log_file = Path(file_handler.baseFilename)
    else:
        _active_log_file = None

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.ExceptionRenderer(),
        structlog.processors.UnicodeDecoder(),
        # Bridge into the stdlib handlers' ProcessorFormatter; must stay last.
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if _active_log_file is not None:
        structlog.get_logger(__name__).info("logging_initialized", log_file=str(_active_log_file))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Configured bound logger.
    """
    return structlog.get_logger(name).bind(logger=name)


def log_context(**kwargs: Any) -> None:
    """Add key-value pairs to every subsequent log record of this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context(*keys: str) -> None:
    """Remove the named context keys, or all of them when none are given."""
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()


@contextmanager
def log_scope(**kwargs: Any) -> Iterator[None]:
    """Bind context keys for the duration of a block, e.g. one CLI command."""
    log_context(**kwargs)
    try:
        yield
    finally:
        clear_log_context(*kwargs)
