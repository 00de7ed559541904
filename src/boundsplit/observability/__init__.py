"""Observability: structured logging and metrics hooks for boundsplit."""

from __future__ import annotations

from .logger import (
    FUNCTION_LOGGER,
    SplitLogAdapter,
    StructuredFormatter,
    adapter_for,
    get_logger,
    resolve_level,
)
from .metrics import SPLIT_METRICS, MetricsHook, NoopMetricsHook, SplitMetrics

__all__ = [
    "FUNCTION_LOGGER",
    "MetricsHook",
    "NoopMetricsHook",
    "SPLIT_METRICS",
    "SplitLogAdapter",
    "SplitMetrics",
    "StructuredFormatter",
    "adapter_for",
    "get_logger",
    "resolve_level",
]
