from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pathlib import Path

_LOGGING_CONFIGURED = False


def setup_logging(
    filename: str | Path | None = None,
    *,
    quiet: bool = False,
    force: bool = False,
) -> structlog.BoundLogger:
    """Set up structured logging for the docs_toc module.

    Args:
        filename: Optional path to a log file. If None, logs are written to stderr.
        quiet: Only emit warnings and errors (progress messages are dropped).
        force: Reconfigure even if logging was already set up.

    Returns:
        A structlog logger instance configured for the docs_toc module.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if not _LOGGING_CONFIGURED or force:
        level = logging.WARNING if quiet else logging.INFO
        handlers: list[logging.Handler] = []
        if filename:
            handlers.append(logging.FileHandler(str(filename), encoding="utf-8"))
        else:
            handlers.append(logging.StreamHandler(sys.stderr))

        logging.basicConfig(
            level=level,
            handlers=handlers,
            format="%(message)s",
            force=True,
        )
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            # reconfigured per run by the CLI, so loggers must not be cached
            cache_logger_on_first_use=False,
        )
        _LOGGING_CONFIGURED = True

    return structlog.get_logger("docs_toc")


logger = setup_logging()
