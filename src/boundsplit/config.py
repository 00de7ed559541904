"""Configuration for the ``split`` host function.

:class:`SplitConfig` is a plain dataclass holding every tuneable knob of
:class:`~boundsplit.function.SplitFunction`.  The splitting core in
:mod:`boundsplit.splitter` takes no configuration object; the only switch it
understands (``fast_path``) is passed per call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boundsplit.observability.logger import resolve_level


@dataclass
class SplitConfig:
    """Complete configuration for a :class:`~boundsplit.function.SplitFunction`.

    Every parameter has a sensible default, so ``SplitConfig()`` is a valid
    configuration.

    Parameters
    ----------
    literal_fast_path:
        Route single-character delimiters through the hand-rolled literal
        scanner.  When ``False`` every delimiter goes through :mod:`re`.
        Results are identical either way; the switch exists for
        benchmarking and cross-checking the two strategies.
    log_failures:
        Log every failed evaluation (with traceback) on the
        ``boundsplit.function`` logger before re-raising it.
    debug_log_route:
        Emit a DEBUG record describing which strategy handled each call.
    log_level:
        Threshold of this function's own log adapter; the shared
        ``boundsplit.function`` logger is left alone.  Accepts an ``int`` or
        a case-insensitive level name.
    metrics:
        A :class:`~boundsplit.observability.MetricsHook`.  ``None`` selects
        :class:`~boundsplit.observability.NoopMetricsHook`.
    """

    # ── Routing ─────────────────────────────────────────────────────────
    literal_fast_path: bool = True

    # ── Logging ─────────────────────────────────────────────────────────
    log_failures: bool = True

    debug_log_route: bool = False

    log_level: int | str = "WARNING"

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        resolve_level(self.log_level)

    def resolved_log_level(self) -> int:
        """Return :attr:`log_level` as a numeric ``logging`` level."""
        return resolve_level(self.log_level)
