"""Tests for file assembly and writing."""

import pytest

from pdatagen.generator.config import GeneratorConfig, load_license_header
from pdatagen.generator.fields import PrimitiveField
from pdatagen.generator.files import File, comment_lines, write_files
from pdatagen.generator.structs import MessagePtrStruct

HEADER = (
    '// Code generated by "pdatagen". DO NOT EDIT.\n'
    '// To regenerate this file run "pdatagen gen".\n'
    "\n"
    "package pdata"
)


@pytest.fixture
def resource_file():
    resource = MessagePtrStruct(
        struct_name="Resource",
        description="Resource information.",
        origin_full_name="otlpresource.Resource",
        fields=(
            PrimitiveField(
                field_name="DroppedAttributesCount",
                origin_field_name="DroppedAttributesCount",
                return_type="uint32",
                default_val="uint32(0)",
                test_val="uint32(17)",
            ),
        ),
    )
    return File(
        name="resource",
        structs=(resource,),
        imports=('otlpresource "example.com/protogen/resource/v1"',),
        test_imports=('"testing"', "", '"github.com/stretchr/testify/assert"'),
    )


def describe_generate_file():
    def starts_with_generated_notice(expect, resource_file):
        text = resource_file.generate_file()
        expect(text.startswith(HEADER + "\n\nimport (\n")) == True

    def lists_imports(expect, resource_file):
        text = resource_file.generate_file()
        expect('import (\n\totlpresource "example.com/protogen/resource/v1"\n)\n\n' in text) == True

    def separates_structs_and_ends_with_newline(expect, resource_file):
        text = resource_file.generate_file()
        expect(")\n\n// Resource information.\n" in text) == True
        copy = "\tdest.SetDroppedAttributesCount(ms.DroppedAttributesCount())\n}\n"
        expect(text.endswith(copy)) == True

    def omits_empty_import_block(expect):
        text = File(name="empty", structs=()).generate_file()
        expect(text) == HEADER + "\n"

    def uses_configured_package(expect, resource_file):
        text = resource_file.generate_file(GeneratorConfig(package_name="otlpdata"))
        expect("\npackage otlpdata\n" in text) == True

    def places_license_above_notice(expect, resource_file):
        config = GeneratorConfig(license_header="Copyright The Authors\n\nLicensed under Apache.")
        text = resource_file.generate_file(config)
        expect(
            text.startswith(
                "// Copyright The Authors\n"
                "//\n"
                "// Licensed under Apache.\n"
                "\n"
                '// Code generated by "pdatagen". DO NOT EDIT.\n'
            )
        ) == True


def describe_generate_test_file():
    def groups_test_imports(expect, resource_file):
        text = resource_file.generate_test_file()
        expect(
            'import (\n\t"testing"\n\n\t"github.com/stretchr/testify/assert"\n)' in text
        ) == True

    def puts_tests_before_helpers(expect, resource_file):
        text = resource_file.generate_test_file()
        tests = text.index("func TestResource_InitEmpty(")
        accessor = text.index("func TestResource_DroppedAttributesCount(")
        helpers = text.index("func generateTestResource()")
        fill = text.index("func fillTestResource(tv Resource) {")
        expect(tests < accessor < helpers < fill) == True
        expect(text.endswith("\ttv.SetDroppedAttributesCount(uint32(17))\n}\n")) == True


def describe_comment_lines():
    def prefixes_every_line(expect):
        expect(comment_lines("a\nb")) == "// a\n// b"

    def keeps_blank_lines_without_trailing_space(expect):
        expect(comment_lines("a\n\nb")) == "// a\n//\n// b"


def describe_write_files():
    def writes_source_and_test_files(expect, tmp_path, resource_file):
        config = GeneratorConfig(output_dir=tmp_path / "out")
        written = write_files([resource_file], config)
        expect(written) == [
            tmp_path / "out" / "generated_resource.go",
            tmp_path / "out" / "generated_resource_test.go",
        ]
        expect(written[0].read_text()) == resource_file.generate_file(config)
        expect(written[1].read_text()) == resource_file.generate_test_file(config)

    def honors_prefix(expect, tmp_path, resource_file):
        config = GeneratorConfig(output_dir=tmp_path, file_prefix="")
        written = write_files([resource_file], config)
        expect([p.name for p in written]) == ["resource.go", "resource_test.go"]

    def overwrites_existing_files(expect, tmp_path, resource_file):
        config = GeneratorConfig(output_dir=tmp_path)
        config.source_path("resource").write_text("stale")
        write_files([resource_file], config)
        expect(config.source_path("resource").read_text().startswith("// Code generated")) == True


def describe_load_license_header():
    def strips_trailing_blank_lines(expect, tmp_path):
        path = tmp_path / "LICENSE"
        path.write_text("Copyright\n\n\n")
        expect(load_license_header(path)) == "Copyright"
        expect(load_license_header(str(path))) == "Copyright"
