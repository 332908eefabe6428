"""Tests for CLI interface."""

import json
import os
import tempfile

from click.testing import CliRunner

from pdatagen.generator.cli import cli


def describe_gen_command():
    def generates_every_file(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["gen", "-o", tmpdir])
            expect(result.exit_code) == 0
            expect(sorted(os.listdir(tmpdir))) == [
                "generated_common.go",
                "generated_common_test.go",
                "generated_metrics.go",
                "generated_metrics_test.go",
                "generated_resource.go",
                "generated_resource_test.go",
                "generated_trace.go",
                "generated_trace_test.go",
            ]

    def generates_selected_file(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["gen", "-o", tmpdir, "-f", "trace"])
            expect(result.exit_code) == 0
            expect(sorted(os.listdir(tmpdir))) == [
                "generated_trace.go",
                "generated_trace_test.go",
            ]
            with open(os.path.join(tmpdir, "generated_trace.go")) as f:
                content = f.read()
            expect("func (ms Span) Status() SpanStatus {" in content) == True
            expect("func (ms SpanStatus) SetCode(" in content) == False

    def applies_package_and_license(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            license_file = os.path.join(tmpdir, "LICENSE")
            with open(license_file, "w") as f:
                f.write("Copyright The Authors\n")
            out_dir = os.path.join(tmpdir, "out")
            result = runner.invoke(
                cli,
                [
                    "gen",
                    "-o",
                    out_dir,
                    "-f",
                    "common",
                    "--package",
                    "otlpdata",
                    "--license-file",
                    license_file,
                ],
            )
            expect(result.exit_code) == 0
            with open(os.path.join(out_dir, "generated_common.go")) as f:
                content = f.read()
            expect(content.startswith("// Copyright The Authors\n\n// Code generated")) == True
            expect("\npackage otlpdata\n" in content) == True

    def reads_output_from_environment(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(
                cli,
                ["gen", "-f", "resource"],
                auto_envvar_prefix="PDATAGEN",
                env={"PDATAGEN_GEN_OUTPUT_DIR": tmpdir},
            )
            expect(result.exit_code) == 0
            expect(os.path.isfile(os.path.join(tmpdir, "generated_resource.go"))) == True

    def fails_with_unknown_file(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["gen", "-o", tmpdir, "-f", "logs"])
            expect(result.exit_code) == 1
            expect("Unknown file: logs" in result.output) == True
            expect(os.listdir(tmpdir)) == []

    def requires_output(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["gen"])
        expect(result.exit_code) != 0
        expect("Missing option" in result.output) == True


def describe_info_command():
    def shows_catalog_summary(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-f", "trace"])
        expect(result.exit_code) == 0
        expect("SpanEventSlice" in result.output) == True
        expect("Hand-written code required" in result.output) == True
        expect("SetCode" in result.output) == True

    def outputs_json(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "--json", "-f", "metrics"])
        expect(result.exit_code) == 0
        data = json.loads(result.output)
        expect([f["name"] for f in data["files"]]) == ["metrics"]
        expect({m["name"] for m in data["manual_code"]}) == {"copyData", "IntGauge"}

    def fails_with_unknown_file(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-f", "logs"])
        expect(result.exit_code) == 1
        expect("Unknown file" in result.output) == True


def describe_main_group():
    def shows_help(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        expect(result.exit_code) == 0
        expect("gen" in result.output) == True
        expect("info" in result.output) == True
