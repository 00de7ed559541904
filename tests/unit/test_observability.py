"""Tests for observability/logger.py and observability/metrics.py"""
import io
import json
import logging
import sys

import pytest

from boundsplit.config import SplitConfig
from boundsplit.models import SplitRoute
from boundsplit.observability import (
    SPLIT_METRICS,
    MetricsHook,
    NoopMetricsHook,
    SplitLogAdapter,
    SplitMetrics,
    StructuredFormatter,
    adapter_for,
    get_logger,
    resolve_level,
)


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, stack_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        if stack_info is not None:
            record.stack_info = stack_info
        return record

    def test_basic_format(self):
        result = json.loads(StructuredFormatter().format(self._get_record("split routed")))
        assert result["message"] == "split routed"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        record = self._get_record("msg", extra_fields={"route": "literal", "limit": 2})
        result = json.loads(StructuredFormatter().format(record))
        assert result["route"] == "literal"
        assert result["limit"] == 2

    def test_non_json_values_stringified(self):
        record = self._get_record("msg", extra_fields={"value": object()})
        result = json.loads(StructuredFormatter().format(record))
        assert result["value"].startswith("<object object")

    def test_exception_info_included(self):
        try:
            raise ValueError("bad limit")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("failed", exc_info=exc_info)))
        assert "ValueError" in result["exception"]

    def test_stack_info_included(self):
        record = self._get_record("msg", stack_info="Stack Trace Here")
        result = json.loads(StructuredFormatter().format(record))
        assert result["stack_info"] == "Stack Trace Here"


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        logger = get_logger("test.boundsplit.unique1")
        assert isinstance(logger, logging.Logger)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logger.propagate is False

    def test_shared_logger_stays_permissive(self):
        logger = get_logger("test.boundsplit.unique2")
        assert logger.level == logging.DEBUG

    def test_idempotent_no_duplicate_handlers(self):
        name = "test.boundsplit.unique3"
        first = get_logger(name)
        second = get_logger(name)
        assert first is second
        assert len(second.handlers) == 1

    def test_custom_stream(self):
        stream = io.StringIO()
        logger = get_logger("test.boundsplit.stream_unique", stream=stream)
        logger.info("hello", extra={"extra_fields": {"key": "val"}})
        record = json.loads(stream.getvalue())
        assert record["message"] == "hello"
        assert record["key"] == "val"


class TestMetricsHookProtocol:
    def test_noop_is_instance_of_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_recording_hook_is_instance_of_protocol(self, metrics):
        assert isinstance(metrics, MetricsHook)

    def test_class_missing_gauge_is_not_instance(self):
        class PartialHook:
            def increment(self, name, value=1, tags=None):
                pass

            def timing(self, name, ms, tags=None):
                pass

        assert not isinstance(PartialHook(), MetricsHook)


class TestNoopMetricsHook:
    def test_all_methods_return_none(self):
        hook = NoopMetricsHook()
        assert hook.increment("boundsplit.evaluations_total") is None
        assert hook.timing("boundsplit.evaluation_duration_ms", 1.5, tags={"route": "literal"}) is None
        assert hook.gauge("boundsplit.segments", 3) is None

    def test_no_instance_dict(self):
        assert not hasattr(NoopMetricsHook(), "__dict__")


class TestResolveLevel:
    def test_names_are_case_insensitive(self):
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level("DEBUG") == logging.DEBUG

    def test_ints_pass_through(self):
        assert resolve_level(15) == 15

    @pytest.mark.parametrize("level", ["LOUD", True, 2.0, None])
    def test_invalid(self, level):
        with pytest.raises(ValueError, match="log_level"):
            resolve_level(level)


class TestSplitLogAdapter:
    def _adapter(self, name, level, stream, fields=None):
        return SplitLogAdapter(get_logger(name, stream=stream), level, fields)

    def test_threshold_is_per_adapter(self):
        stream = io.StringIO()
        quiet = self._adapter("test.boundsplit.adapter.threshold", logging.ERROR, stream)
        loud = SplitLogAdapter(quiet.logger, logging.DEBUG)
        quiet.info("dropped")
        loud.info("kept")
        messages = [json.loads(line)["message"] for line in stream.getvalue().splitlines()]
        assert messages == ["kept"]
        assert quiet.logger.level == logging.DEBUG

    def test_fixed_fields_merge_with_call_fields(self):
        stream = io.StringIO()
        log = self._adapter("test.boundsplit.adapter.merge", logging.DEBUG, stream, {"function": "split", "op": "base"})
        log.warning("m", extra={"extra_fields": {"op": "call", "limit": 2}})
        record = json.loads(stream.getvalue())
        assert record["function"] == "split"
        assert record["op"] == "call"
        assert record["limit"] == 2

    def test_fixed_fields_without_call_extra(self):
        stream = io.StringIO()
        self._adapter("test.boundsplit.adapter.fixed", logging.DEBUG, stream, {"function": "split"}).error("m")
        assert json.loads(stream.getvalue())["function"] == "split"

    def test_adapter_for_uses_config_level(self):
        log = adapter_for(SplitConfig(log_level="ERROR"))
        assert isinstance(log, SplitLogAdapter)
        assert log.level == logging.ERROR
        assert log.logger.name == "boundsplit.function"
        assert not log.isEnabledFor(logging.WARNING)
        assert log.isEnabledFor(logging.ERROR)


class TestSplitMetrics:
    def test_default_is_noop(self):
        assert isinstance(SplitMetrics().hook, NoopMetricsHook)

    def test_rejects_non_hook(self):
        with pytest.raises(TypeError, match="increment/timing/gauge"):
            SplitMetrics(object())

    def test_evaluated(self, metrics):
        SplitMetrics(metrics).evaluated(SplitRoute.PATTERN, 2.5, 4)
        tags = {"route": "pattern"}
        assert metrics.increments == [{"name": "boundsplit.evaluations_total", "value": 1, "tags": tags}]
        assert metrics.timings == [{"name": "boundsplit.evaluation_duration_ms", "ms": 2.5, "tags": tags}]
        assert metrics.gauges == [{"name": "boundsplit.segments", "value": 4, "tags": tags}]

    def test_null_input_and_failed(self, metrics):
        recorder = SplitMetrics(metrics)
        recorder.null_input()
        recorder.failed("LIMIT_PARSE_ERROR")
        assert metrics.increments == [
            {"name": "boundsplit.null_inputs_total", "value": 1, "tags": None},
            {"name": "boundsplit.failures_total", "value": 1, "tags": {"error_code": "LIMIT_PARSE_ERROR"}},
        ]

    def test_unknown_metric(self, metrics):
        with pytest.raises(ValueError, match="unknown metric"):
            SplitMetrics(metrics)._emit("boundsplit.other", 1)

    def test_wrong_tags(self, metrics):
        with pytest.raises(ValueError, match="takes tags"):
            SplitMetrics(metrics)._emit("boundsplit.failures_total", 1, {"route": "literal"})
        assert metrics.increments == []

    def test_declared_metrics(self):
        assert set(SPLIT_METRICS) == {
            "boundsplit.evaluations_total",
            "boundsplit.null_inputs_total",
            "boundsplit.failures_total",
            "boundsplit.evaluation_duration_ms",
            "boundsplit.segments",
        }
