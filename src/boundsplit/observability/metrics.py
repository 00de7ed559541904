"""Metrics for the ``split`` host function.

Backends implement :class:`MetricsHook`; :class:`NoopMetricsHook` is the
default.  :class:`SplitFunction <boundsplit.function.SplitFunction>` never
talks to the hook directly but through :class:`SplitMetrics`, which only
emits the names and tag keys declared in :data:`SPLIT_METRICS`:

===================================  =======  ==============
name                                 kind     tags
===================================  =======  ==============
``boundsplit.evaluations_total``     counter  ``route``
``boundsplit.null_inputs_total``     counter  --
``boundsplit.failures_total``        counter  ``error_code``
``boundsplit.evaluation_duration_ms`` timing  ``route``
``boundsplit.segments``              gauge    ``route``
===================================  =======  ==============
"""

from __future__ import annotations

from typing import Any, NamedTuple, Protocol, runtime_checkable

from boundsplit.models import SplitRoute


@runtime_checkable
class MetricsHook(Protocol):
    """What a metrics backend must provide.

    *tags* map label names to string values.
    """

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        ...

    def timing(self, name: str, ms: float, tags: dict[str, str] | None = None) -> None:
        ...

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        ...


class NoopMetricsHook:
    """Backend that drops every data point."""

    __slots__ = ()

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        pass

    def timing(self, name: str, ms: float, tags: dict[str, str] | None = None) -> None:
        pass

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        pass


class MetricSpec(NamedTuple):
    kind: str
    tags: frozenset[str]


SPLIT_METRICS: dict[str, MetricSpec] = {
    "boundsplit.evaluations_total": MetricSpec("counter", frozenset({"route"})),
    "boundsplit.null_inputs_total": MetricSpec("counter", frozenset()),
    "boundsplit.failures_total": MetricSpec("counter", frozenset({"error_code"})),
    "boundsplit.evaluation_duration_ms": MetricSpec("timing", frozenset({"route"})),
    "boundsplit.segments": MetricSpec("gauge", frozenset({"route"})),
}


class SplitMetrics:
    """Typed emitter for :data:`SPLIT_METRICS` on top of a :class:`MetricsHook`.

    Parameters
    ----------
    hook:
        The backend.  ``None`` selects :class:`NoopMetricsHook`.

    Raises
    ------
    TypeError
        If *hook* does not satisfy :class:`MetricsHook`.
    """

    __slots__ = ("_hook",)

    def __init__(self, hook: Any | None = None) -> None:
        if hook is None:
            hook = NoopMetricsHook()
        elif not isinstance(hook, MetricsHook):
            raise TypeError(f"metrics must implement increment/timing/gauge, got {type(hook).__name__}")
        self._hook = hook

    @property
    def hook(self) -> MetricsHook:
        return self._hook

    def evaluated(self, route: SplitRoute, elapsed_ms: float, segments: int) -> None:
        tags = {"route": route.value}
        self._emit("boundsplit.evaluations_total", 1, tags)
        self._emit("boundsplit.evaluation_duration_ms", elapsed_ms, tags)
        self._emit("boundsplit.segments", segments, tags)

    def null_input(self) -> None:
        self._emit("boundsplit.null_inputs_total", 1)

    def failed(self, error_code: str) -> None:
        self._emit("boundsplit.failures_total", 1, {"error_code": error_code})

    def _emit(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        spec = SPLIT_METRICS.get(name)
        if spec is None:
            raise ValueError(f"unknown metric {name!r}")
        if set(tags or ()) != spec.tags:
            raise ValueError(f"metric {name!r} takes tags {sorted(spec.tags)}, got {sorted(tags or ())}")

        if spec.kind == "counter":
            self._hook.increment(name, int(value), tags=tags)
        elif spec.kind == "timing":
            self._hook.timing(name, value, tags=tags)
        else:
            self._hook.gauge(name, value, tags=tags)
