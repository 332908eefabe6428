"""Metrics signal descriptors."""

from pdatagen.generator.fields import (
    MessagePointerField,
    OneofField,
    PrimitiveField,
    SliceField,
)
from pdatagen.generator.files import File
from pdatagen.generator.structs import MessagePtrStruct, SliceStruct

from .common import start_time_field, timestamp_field
from .resource import resource_field

int_data_point = MessagePtrStruct(
    struct_name="IntDataPoint",
    description=(
        "IntDataPoint is a single data point in a timeseries that describes the\n"
        "time-varying values of a scalar int metric."
    ),
    origin_full_name="otlpmetrics.IntDataPoint",
    fields=(
        start_time_field,
        timestamp_field,
        PrimitiveField(
            field_name="Value",
            origin_field_name="Value",
            return_type="int64",
            default_val="int64(0)",
            test_val="int64(-17)",
        ),
    ),
)

int_data_point_slice = SliceStruct(struct_name="IntDataPointSlice", element=int_data_point)

int_gauge = MessagePtrStruct(
    struct_name="IntGauge",
    description=(
        "IntGauge represents the type of a int scalar metric that always exports the\n"
        "\"current value\" for every data point."
    ),
    origin_full_name="otlpmetrics.IntGauge",
    fields=(
        SliceField(
            field_name="DataPoints",
            origin_field_name="DataPoints",
            return_slice=int_data_point_slice,
        ),
    ),
)

metric = MessagePtrStruct(
    struct_name="Metric",
    description=(
        "Metric represents one metric as a collection of datapoints.\n"
        "See Metric definition in OTLP:\n"
        "https://github.com/open-telemetry/opentelemetry-proto/blob/master/"
        "opentelemetry/proto/metrics/v1/metrics.proto"
    ),
    origin_full_name="otlpmetrics.Metric",
    fields=(
        PrimitiveField(
            field_name="Name",
            origin_field_name="Name",
            return_type="string",
            default_val='""',
            test_val='"test_name"',
        ),
        PrimitiveField(
            field_name="Description",
            origin_field_name="Description",
            return_type="string",
            default_val='""',
            test_val='"test_description"',
        ),
        PrimitiveField(
            field_name="Unit",
            origin_field_name="Unit",
            return_type="string",
            default_val='""',
            test_val='"1"',
        ),
        OneofField(
            copy_func_name="copyData",
            origin_field_name="Data",
            test_val="&otlpmetrics.Metric_IntGauge{}",
            fill_test_name="IntGauge",
        ),
    ),
)

metric_slice = SliceStruct(struct_name="MetricSlice", element=metric)

resource_metrics = MessagePtrStruct(
    struct_name="ResourceMetrics",
    description="ResourceMetrics is a collection of metrics from a Resource.",
    origin_full_name="otlpmetrics.ResourceMetrics",
    fields=(
        resource_field,
        SliceField(
            field_name="Metrics",
            origin_field_name="Metrics",
            return_slice=metric_slice,
        ),
    ),
)

resource_metrics_slice = SliceStruct(
    struct_name="ResourceMetricsSlice", element=resource_metrics
)

metrics_file = File(
    name="metrics",
    structs=(
        resource_metrics_slice,
        resource_metrics,
        metric_slice,
        metric,
        int_gauge,
        int_data_point_slice,
        int_data_point,
    ),
    imports=('otlpmetrics "go.opentelemetry.io/collector/internal/data/protogen/metrics/v1"',),
    test_imports=(
        '"testing"',
        "",
        '"github.com/stretchr/testify/assert"',
        "",
        'otlpmetrics "go.opentelemetry.io/collector/internal/data/protogen/metrics/v1"',
    ),
)
