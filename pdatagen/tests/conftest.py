"""Unit tests configuration file."""

import io

import pytest

from pdatagen.generator.structs import MessagePtrStruct, MessageValueStruct, SliceStruct


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def span():
    return MessagePtrStruct(
        struct_name="Span",
        description="Span represents a single operation within a trace.",
        origin_full_name="otlptrace.Span",
    )


@pytest.fixture
def span_status():
    return MessagePtrStruct(
        struct_name="SpanStatus",
        description="SpanStatus is an optional final status for this span.",
        origin_full_name="otlptrace.Status",
    )


@pytest.fixture
def instrumentation_library():
    return MessageValueStruct(
        struct_name="InstrumentationLibrary",
        description="InstrumentationLibrary is the instrumentation library information.",
        origin_full_name="otlpcommon.InstrumentationLibrary",
    )


@pytest.fixture
def span_event_slice():
    event = MessagePtrStruct(
        struct_name="SpanEvent",
        description="SpanEvent is a time-stamped annotation of the span.",
        origin_full_name="otlptrace.Span_Event",
    )
    return SliceStruct(struct_name="SpanEventSlice", element=event)


@pytest.fixture
def sb():
    return io.StringIO()
