# src/lawgens/core/logging.py
"""Structured logging for lawgens.

lawgens is imported into other projects' test suites, so it never touches
the root logger or the global structlog configuration:

- ``get_logger`` wraps a stdlib logger under the ``lawgens`` namespace with
  its own structlog processor chain. Records carry the structlog event dict
  and propagate like any stdlib record until ``configure_logging`` is called.
- ``configure_logging`` attaches a single ProcessorFormatter handler to the
  ``lawgens`` logger and stops propagation. Calling it again replaces that
  handler; ``reset_logging`` removes it.
"""

import logging
import sys
from typing import IO, Any

import structlog
from structlog.stdlib import ProcessorFormatter

LIBRARY_LOGGER = "lawgens"

# Applied to lawgens events before they reach a handler
_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
]


class _LawgensHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marks the handler installed by configure_logging."""


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop ProcessorFormatter bookkeeping; both keys are always present."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _library_logger() -> logging.Logger:
    logger = logging.getLogger(LIBRARY_LOGGER)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Send lawgens events to ``stream`` (stderr by default).

    Args:
        json_output: If True, render JSON lines. If False, human-readable.
        level: Level for the ``lawgens`` logger (DEBUG, INFO, WARNING, ERROR).
        stream: Where rendered events are written.

    Returns:
        The installed handler.
    """
    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    reset_logging()
    handler = _LawgensHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            # Plain stdlib records logged under "lawgens.*"
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    logger = _library_logger()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return handler


def reset_logging() -> None:
    """Remove the configure_logging handler and restore propagation."""
    logger = _library_logger()
    for handler in [h for h in logger.handlers if isinstance(h, _LawgensHandler)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bound logger for a lawgens module.

    Args:
        name: Logger name (typically __name__, always under ``lawgens``).
    """
    _library_logger()
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger
