"""Trace signal descriptors."""

from pdatagen.generator.fields import (
    MessagePointerField,
    PrimitiveField,
    SliceField,
    TypedPrimitiveField,
)
from pdatagen.generator.files import File
from pdatagen.generator.structs import MessagePtrStruct, SliceStruct

from .common import (
    dropped_attributes_count_field,
    end_time_field,
    instrumentation_library_field,
    name_field,
    start_time_field,
    timestamp_field,
)
from .resource import resource_field

trace_id_field = TypedPrimitiveField(
    field_name="TraceID",
    origin_field_name="TraceId",
    return_type="TraceID",
    raw_type="otlpcommon.TraceID",
    default_val="NewTraceID([16]byte{})",
    test_val="NewTraceID([16]byte{1, 2, 3, 4, 5, 6, 7, 8, 8, 7, 6, 5, 4, 3, 2, 1})",
)

span_id_field = TypedPrimitiveField(
    field_name="SpanID",
    origin_field_name="SpanId",
    return_type="SpanID",
    raw_type="otlpcommon.SpanID",
    default_val="NewSpanID([8]byte{})",
    test_val="NewSpanID([8]byte{1, 2, 3, 4, 5, 6, 7, 8})",
)

parent_span_id_field = TypedPrimitiveField(
    field_name="ParentSpanID",
    origin_field_name="ParentSpanId",
    return_type="SpanID",
    raw_type="otlpcommon.SpanID",
    default_val="NewSpanID([8]byte{})",
    test_val="NewSpanID([8]byte{8, 7, 6, 5, 4, 3, 2, 1})",
)

trace_state_field = TypedPrimitiveField(
    field_name="TraceState",
    origin_field_name="TraceState",
    return_type="TraceState",
    raw_type="string",
    default_val='TraceState("")',
    test_val='TraceState("congo=congos")',
)

span_status = MessagePtrStruct(
    struct_name="SpanStatus",
    description=(
        "SpanStatus is an optional final status for this span. Semantically when Status\n"
        "wasn't set it is means span ended without errors and assume Status.Ok (code = 0)."
    ),
    origin_full_name="otlptrace.Status",
    fields=(
        # SetCode also keeps the deprecated code in sync, so it is written by hand.
        TypedPrimitiveField(
            field_name="Code",
            origin_field_name="Code",
            return_type="StatusCode",
            raw_type="otlptrace.Status_StatusCode",
            default_val="StatusCode(0)",
            test_val="StatusCode(1)",
            manual_setter=True,
        ),
        PrimitiveField(
            field_name="Message",
            origin_field_name="Message",
            return_type="string",
            default_val='""',
            test_val='"cancelled"',
        ),
    ),
)

span_event = MessagePtrStruct(
    struct_name="SpanEvent",
    description=(
        "SpanEvent is a time-stamped annotation of the span, consisting of user-supplied\n"
        "text description and key-value pairs. See OTLP for event definition."
    ),
    origin_full_name="otlptrace.Span_Event",
    fields=(timestamp_field, name_field, dropped_attributes_count_field),
)

span_event_slice = SliceStruct(struct_name="SpanEventSlice", element=span_event)

span_link = MessagePtrStruct(
    struct_name="SpanLink",
    description=(
        "SpanLink is a pointer from the current span to another span in the same trace or in a\n"
        "different trace. See OTLP for link definition."
    ),
    origin_full_name="otlptrace.Span_Link",
    fields=(trace_id_field, span_id_field, trace_state_field, dropped_attributes_count_field),
)

span_link_slice = SliceStruct(struct_name="SpanLinkSlice", element=span_link)

span = MessagePtrStruct(
    struct_name="Span",
    description=(
        "Span represents a single operation within a trace.\n"
        "See Span definition in OTLP:\n"
        "https://github.com/open-telemetry/opentelemetry-proto/blob/master/"
        "opentelemetry/proto/trace/v1/trace.proto#L37"
    ),
    origin_full_name="otlptrace.Span",
    fields=(
        trace_id_field,
        span_id_field,
        trace_state_field,
        parent_span_id_field,
        name_field,
        TypedPrimitiveField(
            field_name="Kind",
            origin_field_name="Kind",
            return_type="SpanKind",
            raw_type="otlptrace.Span_SpanKind",
            default_val="SpanKindUNSPECIFIED",
            test_val="SpanKindSERVER",
        ),
        start_time_field,
        end_time_field,
        dropped_attributes_count_field,
        SliceField(
            field_name="Events",
            origin_field_name="Events",
            return_slice=span_event_slice,
        ),
        PrimitiveField(
            field_name="DroppedEventsCount",
            origin_field_name="DroppedEventsCount",
            return_type="uint32",
            default_val="uint32(0)",
            test_val="uint32(17)",
        ),
        SliceField(
            field_name="Links",
            origin_field_name="Links",
            return_slice=span_link_slice,
        ),
        PrimitiveField(
            field_name="DroppedLinksCount",
            origin_field_name="DroppedLinksCount",
            return_type="uint32",
            default_val="uint32(0)",
            test_val="uint32(17)",
        ),
        MessagePointerField(
            field_name="Status",
            origin_field_name="Status",
            return_message=span_status,
        ),
    ),
)

span_slice = SliceStruct(struct_name="SpanSlice", element=span)

instrumentation_library_spans = MessagePtrStruct(
    struct_name="InstrumentationLibrarySpans",
    description=(
        "InstrumentationLibrarySpans is a collection of spans from a\n"
        "LibraryInstrumentation."
    ),
    origin_full_name="otlptrace.InstrumentationLibrarySpans",
    fields=(
        instrumentation_library_field,
        SliceField(field_name="Spans", origin_field_name="Spans", return_slice=span_slice),
    ),
)

instrumentation_library_spans_slice = SliceStruct(
    struct_name="InstrumentationLibrarySpansSlice",
    element=instrumentation_library_spans,
)

resource_spans = MessagePtrStruct(
    struct_name="ResourceSpans",
    description="ResourceSpans is a collection of spans from a Resource.",
    origin_full_name="otlptrace.ResourceSpans",
    fields=(
        resource_field,
        SliceField(
            field_name="InstrumentationLibrarySpans",
            origin_field_name="InstrumentationLibrarySpans",
            return_slice=instrumentation_library_spans_slice,
        ),
    ),
)

resource_spans_slice = SliceStruct(struct_name="ResourceSpansSlice", element=resource_spans)

trace_file = File(
    name="trace",
    structs=(
        resource_spans_slice,
        resource_spans,
        instrumentation_library_spans_slice,
        instrumentation_library_spans,
        span_slice,
        span,
        span_event_slice,
        span_event,
        span_link_slice,
        span_link,
        span_status,
    ),
    imports=(
        'otlpcommon "go.opentelemetry.io/collector/internal/data/protogen/common/v1"',
        'otlptrace "go.opentelemetry.io/collector/internal/data/protogen/trace/v1"',
    ),
    test_imports=(
        '"testing"',
        "",
        '"github.com/stretchr/testify/assert"',
        "",
        'otlptrace "go.opentelemetry.io/collector/internal/data/protogen/trace/v1"',
    ),
)
