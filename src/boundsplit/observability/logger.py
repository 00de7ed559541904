"""Structured JSON logging for boundsplit.

Records are written one JSON object per line::

    {"ts": "2026-10-19T08:00:00.000000+00:00", "level": "ERROR",
     "logger": "boundsplit.function", "message": "split evaluation failed",
     "function": "split", "pattern": "[a", "error_type": "PatternError"}

The named loggers returned by :func:`get_logger` are shared by the whole
process and stay at the permissive level they were created with.  Per-caller
verbosity lives in a :class:`SplitLogAdapter`, so two
:class:`~boundsplit.function.SplitFunction` instances with different
``log_level`` settings never affect each other.

Usage::

    from boundsplit.config import SplitConfig
    from boundsplit.observability import adapter_for

    log = adapter_for(SplitConfig(log_level="DEBUG"))
    log.debug("split routed", extra={"extra_fields": {"route": "literal"}})
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from boundsplit.config import SplitConfig

FUNCTION_LOGGER = "boundsplit.function"


def resolve_level(level: int | str) -> int:
    """Return *level* as a numeric ``logging`` level.

    Raises
    ------
    ValueError
        If *level* is an unknown level name, or neither ``int`` nor ``str``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"log_level must be a known logging level, got {level!r}")
        return resolved
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"log_level must be an int or a level name, got {level!r}")
    return level


class StructuredFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    ``ts``, ``level``, ``logger`` and ``message`` are always present.
    ``extra_fields`` are merged on top; ``exception`` and ``stack_info``
    appear only when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **(getattr(record, "extra_fields", None) or {}),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)
        return json.dumps(entry, default=str)


class SplitLogAdapter(logging.LoggerAdapter):
    """Logger view with its own threshold and fixed structured fields.

    Parameters
    ----------
    logger:
        The shared underlying logger.
    level:
        Records below this level are dropped by this adapter only.
    fields:
        Merged into ``extra_fields`` of every record; per-call fields win.
    """

    def __init__(
        self,
        logger: logging.Logger,
        level: int,
        fields: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(logger, fields or {})
        self.level = level

    def isEnabledFor(self, level: int) -> bool:
        return level >= self.level and self.logger.isEnabledFor(level)

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["extra_fields"] = {**self.extra, **extra.get("extra_fields", {})}
        kwargs["extra"] = extra
        return msg, kwargs


# Loggers that already carry a StructuredFormatter handler.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "boundsplit",
    *,
    stream: Any | None = None,
) -> logging.Logger:
    """Return the shared structured logger *name*.

    The first call attaches one :class:`StructuredFormatter` handler writing
    to *stream* (``sys.stderr`` by default) and sets the logger to
    ``DEBUG``; thresholds are applied by :class:`SplitLogAdapter`.  Later
    calls return the same logger untouched.
    """
    logger = logging.getLogger(name)
    if name not in _configured_loggers:
        logger.setLevel(logging.DEBUG)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        _configured_loggers.add(name)
    return logger


def adapter_for(config: SplitConfig, name: str = FUNCTION_LOGGER) -> SplitLogAdapter:
    """Build the adapter a :class:`~boundsplit.function.SplitFunction` logs through."""
    return SplitLogAdapter(
        get_logger(name),
        config.resolved_log_level(),
        {"function": "split"},
    )
