"""``split(str, regex[, limit])`` as a host query-engine function.

:class:`SplitFunction` is the glue between a host engine and
:func:`boundsplit.splitter.split`.  The host calls :meth:`~SplitFunction.initialize`
once with the number of arguments in the call expression, then
:meth:`~SplitFunction.evaluate` once per row.  The adapter

* rejects argument counts other than 2 or 3,
* returns ``None`` for a ``None`` string or pattern without splitting,
* converts host values to ``str`` and parses the optional limit,
* wraps every failure in :class:`~boundsplit.errors.SplitEvaluationError`,
  keeping the underlying exception as its cause, and
* renders ``split(a, b[, c])`` for plan printing.

Usage::

    from boundsplit import SplitFunction

    fn = SplitFunction()
    fn.initialize(3)
    fn.evaluate("oneAtwoBthreeC", "[ABC]", "2")   # ['one', 'twoBthreeC']
"""

from __future__ import annotations

import time
import traceback
from collections.abc import Sequence
from typing import Any

from boundsplit.coerce import parse_limit, to_text
from boundsplit.config import SplitConfig
from boundsplit.errors import (
    BoundSplitError,
    SplitArgumentLengthError,
    SplitEvaluationError,
)
from boundsplit.models import FunctionDescription
from boundsplit.observability import SplitMetrics, adapter_for
from boundsplit.splitter import UNLIMITED, route_for, split


def _describe_failure(exc: BaseException) -> str:
    """Return ``"<message>: <formatted traceback>"`` for *exc*."""
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return f"{exc}: {trace}"


class SplitFunction:
    """Host-engine adapter for :func:`boundsplit.splitter.split`.

    Parameters
    ----------
    config:
        Adapter configuration.  ``None`` uses :class:`SplitConfig` defaults.
    """

    NAME = "split"
    MIN_ARGS = 2
    MAX_ARGS = 3

    DESCRIPTION = FunctionDescription(
        name=NAME,
        usage="_FUNC_(str, regex, [limit]) - Splits str around occurrences that match regex",
        extended=(
            "Example:\n"
            "  > SELECT _FUNC_('oneAtwoBthreeC', '[ABC]', 2) FROM src LIMIT 1;\n"
            '  ["one", "twoBthreeC"]\n'
            "  Note: setting limit to 0 will cause trailing empty entries to be truncated "
            "(which is the earlier behavior when \"limit\" was not available as third parameter)"
        ),
    )

    def __init__(self, config: SplitConfig | None = None) -> None:
        self._config = config or SplitConfig()
        self._metrics = SplitMetrics(self._config.metrics)
        self._log = adapter_for(self._config)
        self._arg_count: int | None = None

    @property
    def config(self) -> SplitConfig:
        return self._config

    @property
    def arg_count(self) -> int | None:
        """Argument count recorded by :meth:`initialize`, if it has run."""
        return self._arg_count

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, arg_count: int) -> None:
        """Validate the call-site arity.

        Raises
        ------
        SplitArgumentLengthError
            If *arg_count* is not 2 or 3.
        """
        self._check_arg_count(arg_count)
        self._arg_count = arg_count

    def evaluate(self, *args: Any) -> list[str] | None:
        """Split ``args[0]`` around ``args[1]``, bounded by ``args[2]``.

        Returns
        -------
        list[str] | None
            The parts, or ``None`` when the string or the pattern is
            ``None``.

        Raises
        ------
        SplitArgumentLengthError
            If called with other than 2 or 3 arguments.
        SplitEvaluationError
            For any failure while converting, parsing or splitting.  The
            underlying exception is available as ``cause``.
        """
        self._check_arg_count(len(args))

        if args[0] is None or args[1] is None:
            self._metrics.null_input()
            return None

        t0 = time.monotonic()
        try:
            text = to_text(args[0])
            pattern = to_text(args[1])
            limit = parse_limit(args[2]) if len(args) >= 3 else UNLIMITED
            route = route_for(pattern, fast_path=self._config.literal_fast_path)
            if self._config.debug_log_route:
                self._log.debug(
                    "split routed",
                    extra={
                        "extra_fields": {
                            "op": "split",
                            "route": route.value,
                            "pattern": pattern,
                            "limit": limit,
                        }
                    },
                )
            parts = split(text, pattern, limit, fast_path=self._config.literal_fast_path)
        except Exception as exc:
            raise self._wrap_failure(exc, args) from exc

        elapsed_ms = (time.monotonic() - t0) * 1000
        self._metrics.evaluated(route, elapsed_ms, len(parts))
        return parts

    def display_string(self, children: Sequence[str]) -> str:
        """Render the call as ``split(a, b)`` or ``split(a, b, c)``."""
        self._check_arg_count(len(children))
        return f"{self.NAME}({', '.join(children)})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_arg_count(self, count: int) -> None:
        if count < self.MIN_ARGS or count > self.MAX_ARGS:
            raise SplitArgumentLengthError(
                "The function SPLIT(s, regexp) takes either 2 (without limit) "
                "or 3 (with limit) arguments.",
                context={
                    "arg_count": count,
                    "min_args": self.MIN_ARGS,
                    "max_args": self.MAX_ARGS,
                },
            )

    def _wrap_failure(self, exc: Exception, args: Sequence[Any]) -> SplitEvaluationError:
        error_code = exc.code if isinstance(exc, BoundSplitError) else None
        code_tag = getattr(error_code, "value", error_code) or type(exc).__name__
        self._metrics.failed(code_tag)
        if self._config.log_failures:
            self._log.error(
                "split evaluation failed",
                exc_info=exc,
                extra={
                    "extra_fields": {
                        "op": "split",
                        "pattern": args[1],
                        "limit": args[2] if len(args) >= 3 else None,
                        "error_type": type(exc).__name__,
                    }
                },
            )
        return SplitEvaluationError(
            _describe_failure(exc),
            context={"error_code": error_code, "error_type": type(exc).__name__},
            cause=exc,
        )
