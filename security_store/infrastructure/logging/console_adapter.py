"""Console logging adapter.

Writes structured logs to stdout through structlog:
- development: colored, human-readable lines
- testing/ci/production: one JSON object per line

Password hashes travel through the same code paths as the rest of a user
record, so every entry passes through a redaction processor that masks
``password``-like keys before rendering.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

REDACTED = "***"
SECRET_KEYS = frozenset({"password", "password_hash", "admin_password_hash"})


def redact_secrets(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """structlog processor masking secret values."""
    for key in SECRET_KEYS & event_dict.keys():
        if event_dict[key] is not None:
            event_dict[key] = REDACTED
    return event_dict


def _error_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger implementing LoggerProtocol.

    Args:
        use_json: JSON lines when True, human-readable when False.
        level: Minimum level name, case-insensitive (DEBUG, INFO, ...).

    Example:
        >>> logger = ConsoleAdapter(use_json=True, level="DEBUG")
        >>> logger.bind(component="bootstrap").info("security_bootstrap_complete")
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                redact_secrets,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger("security_store")

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; ``error`` adds error_type and error_message fields."""
        self._logger.error(message, **_error_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure that stops a component (e.g. bootstrap)."""
        self._logger.critical(message, **_error_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose entries all carry ``context``.

        The receiver is left unchanged.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    with_context = bind
