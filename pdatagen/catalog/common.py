"""Descriptors shared by every signal."""

from pdatagen.generator.fields import MessageValueField, PrimitiveField, TypedPrimitiveField
from pdatagen.generator.files import File
from pdatagen.generator.structs import MessageValueStruct

instrumentation_library = MessageValueStruct(
    struct_name="InstrumentationLibrary",
    description=(
        "InstrumentationLibrary is a message representing the instrumentation library\n"
        "information."
    ),
    origin_full_name="otlpcommon.InstrumentationLibrary",
    fields=(
        PrimitiveField(
            field_name="Name",
            origin_field_name="Name",
            return_type="string",
            default_val='""',
            test_val='"test_name"',
        ),
        PrimitiveField(
            field_name="Version",
            origin_field_name="Version",
            return_type="string",
            default_val='""',
            test_val='"test_version"',
        ),
    ),
)

common_file = File(
    name="common",
    structs=(instrumentation_library,),
    imports=('otlpcommon "go.opentelemetry.io/collector/internal/data/protogen/common/v1"',),
    test_imports=(
        '"testing"',
        "",
        '"github.com/stretchr/testify/assert"',
    ),
)

instrumentation_library_field = MessageValueField(
    field_name="InstrumentationLibrary",
    origin_field_name="InstrumentationLibrary",
    return_message=instrumentation_library,
)

start_time_field = TypedPrimitiveField(
    field_name="StartTime",
    origin_field_name="StartTimeUnixNano",
    return_type="TimestampUnixNano",
    raw_type="uint64",
    default_val="TimestampUnixNano(0)",
    test_val="TimestampUnixNano(1234567890)",
)

end_time_field = TypedPrimitiveField(
    field_name="EndTime",
    origin_field_name="EndTimeUnixNano",
    return_type="TimestampUnixNano",
    raw_type="uint64",
    default_val="TimestampUnixNano(0)",
    test_val="TimestampUnixNano(1234567890)",
)

timestamp_field = TypedPrimitiveField(
    field_name="Timestamp",
    origin_field_name="TimeUnixNano",
    return_type="TimestampUnixNano",
    raw_type="uint64",
    default_val="TimestampUnixNano(0)",
    test_val="TimestampUnixNano(1234567890)",
)

name_field = PrimitiveField(
    field_name="Name",
    origin_field_name="Name",
    return_type="string",
    default_val='""',
    test_val='"test_name"',
)

dropped_attributes_count_field = PrimitiveField(
    field_name="DroppedAttributesCount",
    origin_field_name="DroppedAttributesCount",
    return_type="uint32",
    default_val="uint32(0)",
    test_val="uint32(17)",
)
