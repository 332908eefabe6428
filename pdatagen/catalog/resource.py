"""Resource descriptors."""

from pdatagen.generator.fields import MessagePointerField
from pdatagen.generator.files import File
from pdatagen.generator.structs import MessagePtrStruct

from .common import dropped_attributes_count_field

resource = MessagePtrStruct(
    struct_name="Resource",
    description="Resource information.",
    origin_full_name="otlpresource.Resource",
    fields=(dropped_attributes_count_field,),
)

resource_file = File(
    name="resource",
    structs=(resource,),
    imports=('otlpresource "go.opentelemetry.io/collector/internal/data/protogen/resource/v1"',),
    test_imports=(
        '"testing"',
        "",
        '"github.com/stretchr/testify/assert"',
    ),
)

resource_field = MessagePointerField(
    field_name="Resource",
    origin_field_name="Resource",
    return_message=resource,
)
