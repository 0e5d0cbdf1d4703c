import logging

from prometheus_client import REGISTRY

from haiku_detector.utils.observability import (
    CounterHandle,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


class RecordingSpan:
    def __init__(self) -> None:
        self.attributes = {}
        self.exceptions = []

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def record_exception(self, error):
        self.exceptions.append(error)


def test_structured_logger_renders_bound_and_call_context(caplog):
    caplog.set_level(logging.INFO, logger="haiku_detector.tests")
    logger = get_logger("haiku_detector.tests").bind(component="matcher")

    logger.info("Checked message", context={"words": 17})

    assert caplog.records[-1].getMessage() == 'Checked message | {"component": "matcher", "words": 17}'


def test_structured_logger_without_context_keeps_message(caplog):
    caplog.set_level(logging.INFO, logger="haiku_detector.tests")

    get_logger("haiku_detector.tests").info("plain")

    assert caplog.records[-1].getMessage() == "plain"


def test_create_counter_reuses_registered_collector():
    first = create_counter("haiku_test_events_total", "Test events", ("kind",))
    second = create_counter("haiku_test_events_total", "Test events", ("kind",))

    assert first.collector is second.collector

    second.labels(kind="unit").inc()
    second.labels(kind="unit").inc(2)
    assert REGISTRY.get_sample_value("haiku_test_events_total", {"kind": "unit"}) == 3.0


def test_counter_with_unknown_labels_becomes_noop():
    counter = create_counter("haiku_test_labelled_total", "Labelled", ("kind",))

    handle = counter.labels(colour="red")

    assert isinstance(handle, CounterHandle)
    assert handle.collector is None
    handle.inc()


def test_histogram_timer_observes_duration():
    histogram = create_histogram("haiku_test_latency_seconds", "Test latency")

    with histogram.time():
        pass

    assert REGISTRY.get_sample_value("haiku_test_latency_seconds_count") == 1.0


def test_add_span_attributes_skips_non_string_keys():
    span = RecordingSpan()

    add_span_attributes(span, {"haiku.mode": "strict", 3: "ignored"})

    assert span.attributes == {"haiku.mode": "strict"}


def test_span_helpers_accept_missing_span():
    add_span_attributes(None, {"key": "value"})
    record_exception(None, ValueError("boom"))


def test_record_exception_flags_span():
    span = RecordingSpan()
    error = ValueError("boom")

    record_exception(span, error)

    assert span.exceptions == [error]
    assert span.attributes["error"] is True


def test_start_span_yields_span():
    with start_span("haiku.test", {"message.length": 3}) as span:
        assert span is not None
