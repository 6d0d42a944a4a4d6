"""Integration tests for the pipecut CLI.

These tests run the Typer app end-to-end:
- optimize from CLI options and from job files
- console formats, JSON result files and multi-format export
- validate exit codes
- formats listing
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pipecut.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

REFERENCE_ARGS = [
    "optimize",
    "--stock-length",
    "6000",
    "--stock-quantity",
    "10",
    "--cut",
    "1200x12",
    "--cut",
    "850x8",
    "--cut",
    "2400x4",
]


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


# =============================================================================
# optimize
# =============================================================================


class TestOptimizeFromOptions:
    """optimize driven by --stock-length/--stock-quantity/--cut."""

    def test_default_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS)

        assert result.exit_code == 0
        assert "CUTTING PLAN" in result.output
        assert "24 cuts, 5152.0 mm waste" in result.output

    def test_summary_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS + ["--format", "summary"])

        assert result.exit_code == 0
        assert "Material efficiency:      85.7%" in result.output

    def test_diagram_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS + ["--format", "diagram"])

        assert result.exit_code == 0
        assert "CUT DIAGRAM - 6 unit(s)" in result.output

    def test_json_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS + ["--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["stock_units_used"] == 6

    def test_all_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS + ["--format", "all"])

        assert result.exit_code == 0
        for heading in ("OPTIMIZATION SUMMARY", "CUT DIAGRAM", "CUTTING PLAN"):
            assert heading in result.output

    def test_kerf_option(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "optimize",
                "--stock-length",
                "2400",
                "--stock-quantity",
                "1",
                "--cut",
                "1200x2",
                "--kerf",
                "0",
                "--format",
                "summary",
            ],
        )

        assert result.exit_code == 0
        assert "Material efficiency:      100.0%" in result.output

    def test_unmet_demand_warning(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", "--stock-length", "6000", "--stock-quantity", "1", "--cut", "5000x2"],
        )

        assert result.exit_code == 0
        assert "Warning: 1 piece(s) could not be cut" in result.output
        assert "5000 mm: 1 of 2 missing" in result.output

    def test_missing_inputs(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["optimize", "--stock-length", "6000"])

        assert result.exit_code == 1
        assert "are required when --config is not provided" in result.output

    def test_malformed_cut(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", "--stock-length", "6000", "--stock-quantity", "1", "--cut", "1200"],
        )

        assert result.exit_code == 1
        assert "Expected LENGTHxQTY" in result.output

    def test_invalid_value(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", "--stock-length=-5", "--stock-quantity", "1", "--cut", "100x1"],
        )

        assert result.exit_code == 1
        assert "stock[0]: Stock length must be positive" in result.output

    def test_infinite_stock_length(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", "--stock-length", "inf", "--stock-quantity", "1", "--cut", "100x1"],
        )

        assert result.exit_code == 1
        assert "stock[0]: Stock length must be finite" in result.output

    def test_unknown_console_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, REFERENCE_ARGS + ["--format", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format 'pdf'" in result.output


class TestOptimizeFromConfig:
    """optimize driven by a job file."""

    def test_config_output_format_used(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["optimize", "--config", str(FIXTURES_PATH / "valid_job.json")]
        )

        assert result.exit_code == 0
        assert "OPTIMIZATION SUMMARY" in result.output
        assert "steel, OD 48.3 mm x 3.2 mm wall" in result.output

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "optimize",
                "--config",
                str(FIXTURES_PATH / "valid_job.json"),
                "--kerf",
                "5",
                "--stock-quantity",
                "2",
                "--format",
                "summary",
            ],
        )

        assert result.exit_code == 0
        assert "Kerf width:             5.0 mm" in result.output
        assert "Stock units used:         2 of 2" in result.output
        assert "UNMET DEMAND" in result.output

    def test_missing_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["optimize", "--config", str(FIXTURES_PATH / "nonexistent.json")]
        )

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_kerf_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["optimize", "--config", str(FIXTURES_PATH / "valid_job.json"), "--kerf=-1"],
        )

        assert result.exit_code == 1
        assert "Invalid override" in result.output


class TestOptimizeExports:
    """--output and --output-formats."""

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "result.json"

        result = runner.invoke(app, REFERENCE_ARGS + ["--output", str(output_file)])

        assert result.exit_code == 0
        assert json.loads(output_file.read_text(encoding="utf-8"))["cut_operations_count"] == 24

    def test_output_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            REFERENCE_ARGS
            + [
                "--output-formats",
                "csv,dxf",
                "--output-dir",
                str(tmp_path),
                "--project-name",
                "rail",
            ],
        )

        assert result.exit_code == 0
        assert (tmp_path / "rail_csv.csv").exists()
        assert (tmp_path / "rail_dxf.dxf").exists()
        assert "Exported files:" in result.output

    def test_all_output_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, REFERENCE_ARGS + ["--output-formats", "all", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 0
        assert len(list(tmp_path.iterdir())) == 5

    def test_unknown_output_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, REFERENCE_ARGS + ["--output-formats", "pdf", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: pdf" in result.output


# =============================================================================
# validate
# =============================================================================


class TestValidateCommand:
    """Exit codes and messages of the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_job.json")])

        assert result.exit_code == 0
        assert "3 cut length(s), 24 piece(s) from 10 x 6000 mm stock, kerf 2 mm" in result.output
        assert "Job is valid." in result.output

    def test_config_with_warnings(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "job_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "cuts[1].length" in result.output
        assert "stock[0].quantity" in result.output
        assert "Job can run, with 2 warning(s)." in result.output

    def test_kerf_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "kerf_too_wide.json")])

        assert result.exit_code == 1
        assert "parameters.kerf_width" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "stock[0].colour" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestFormatsCommand:
    def test_lists_registered_formats(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == ["csv", "dxf", "json", "svg", "txt"]
