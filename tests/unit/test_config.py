"""Tests for job configuration loading, validation, merging and adaptation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pipecut.application import CutInput, ParametersInput, StockInput
from pipecut.application.config import (
    ConfigError,
    OptimizationJobConfiguration,
    config_to_inputs,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    validate_config,
)
from pipecut.application.config.loader import json_path


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# =============================================================================
# Loading
# =============================================================================


class TestLoadConfig:
    """File loading and schema validation."""

    def test_load_valid_file(self, tmp_path: Path, reference_job_dict: dict) -> None:
        config = load_config(write_json(tmp_path / "job.json", reference_job_dict))

        assert config.project == "Reference job"
        assert config.stock[0].length == 6000
        assert [cut.length for cut in config.cuts] == [1200, 850, 2400]
        assert config.parameters.min_waste_threshold == 100.0
        assert config.output.format == "table"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_unknown_field_rejected(self, reference_job_dict: dict) -> None:
        reference_job_dict["stock"][0]["colour"] = "red"

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(reference_job_dict)

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "stock[0].colour"

    @pytest.mark.parametrize(
        ("section", "field", "value"),
        [
            ("parameters", "kerf_width", -1),
            ("parameters", "prioritize_waste_reduction", 101),
        ],
    )
    def test_parameter_ranges(
        self, reference_job_dict: dict, section: str, field: str, value: float
    ) -> None:
        reference_job_dict[section][field] = value

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(reference_job_dict)

        assert exc_info.value.details[0]["path"] == f"{section}.{field}"

    def test_non_positive_cut_length_rejected(self, reference_job_dict: dict) -> None:
        reference_job_dict["cuts"][1]["length"] = 0

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(reference_job_dict)

        assert exc_info.value.details[0]["path"] == "cuts[1].length"

    @pytest.mark.parametrize(
        ("section", "field"),
        [("stock", "length"), ("cuts", "length"), ("parameters", "kerf_width")],
    )
    def test_infinite_values_rejected(
        self, reference_job_dict: dict, section: str, field: str
    ) -> None:
        target = reference_job_dict[section]
        target = target[0] if isinstance(target, list) else target
        target[field] = float("inf")

        with pytest.raises(ConfigError):
            load_config_from_dict(reference_job_dict)

    def test_empty_cut_list_rejected(self, reference_job_dict: dict) -> None:
        reference_job_dict["cuts"] = []

        with pytest.raises(ConfigError):
            load_config_from_dict(reference_job_dict)

    def test_newer_minor_version_accepted(self, reference_job_dict: dict) -> None:
        reference_job_dict["schema_version"] = "1.3"
        assert load_config_from_dict(reference_job_dict).schema_version == "1.3"

    def test_unsupported_major_version_rejected(self, reference_job_dict: dict) -> None:
        reference_job_dict["schema_version"] = "2.0"

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(reference_job_dict)

        assert "Unsupported schema version" in str(exc_info.value)

    def test_json_path(self) -> None:
        assert json_path(("parameters", "kerf_width")) == "parameters.kerf_width"
        assert json_path(("cuts", 0, "length")) == "cuts[0].length"
        assert json_path(()) == "job"

    def test_validation_message_lists_each_value(self, reference_job_dict: dict) -> None:
        reference_job_dict["cuts"][0]["length"] = -5
        reference_job_dict["parameters"]["kerf_width"] = -1

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(reference_job_dict)

        lines = str(exc_info.value).splitlines()
        assert lines[0] == "Job has 2 invalid value(s):"
        assert lines[1].startswith("  - cuts[0].length: ")
        assert lines[1].endswith("(got -5)")
        assert lines[2].startswith("  - parameters.kerf_width: ")

    def test_non_object_job_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict([])  # type: ignore[arg-type]

        assert exc_info.value.details[0]["path"] == "job"


# =============================================================================
# Advisory validation
# =============================================================================


class TestValidateConfig:
    """Cutting advisories and exit codes."""

    def test_reference_job_is_clean(self, reference_job_dict: dict) -> None:
        result = validate_config(load_config_from_dict(reference_job_dict))

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_kerf_not_smaller_than_stock_is_error(self, reference_job_dict: dict) -> None:
        reference_job_dict["stock"][0]["length"] = 2
        reference_job_dict["parameters"]["kerf_width"] = 2

        result = validate_config(load_config_from_dict(reference_job_dict))

        assert result.exit_code == 1
        assert result.errors[0].path == "parameters.kerf_width"

    def test_oversized_cut_warning(self, reference_job_dict: dict) -> None:
        reference_job_dict["cuts"].append({"length": 5999, "quantity": 1})

        result = validate_config(load_config_from_dict(reference_job_dict))

        assert result.exit_code == 2
        assert [w.path for w in result.warnings] == ["cuts[3].length"]

    def test_insufficient_stock_warning(self, reference_job_dict: dict) -> None:
        reference_job_dict["stock"][0]["quantity"] = 2

        result = validate_config(load_config_from_dict(reference_job_dict))

        assert result.exit_code == 2
        assert [w.path for w in result.warnings] == ["stock[0].quantity"]

    def test_waste_threshold_above_stock_length_warning(
        self, reference_job_dict: dict
    ) -> None:
        reference_job_dict["parameters"]["min_waste_threshold"] = 6500

        result = validate_config(load_config_from_dict(reference_job_dict))

        assert [w.path for w in result.warnings] == ["parameters.min_waste_threshold"]

    def test_extra_stock_specifications_warning(self, reference_job_dict: dict) -> None:
        reference_job_dict["stock"].append({"length": 3000, "quantity": 5})

        result = validate_config(load_config_from_dict(reference_job_dict))

        assert [w.path for w in result.warnings] == ["stock"]


# =============================================================================
# Merging and adaptation
# =============================================================================


class TestMergeAndAdapt:
    """CLI overrides and conversion to command inputs."""

    @pytest.fixture
    def config(self, reference_job_dict: dict) -> OptimizationJobConfiguration:
        return load_config_from_dict(reference_job_dict)

    def test_none_values_do_not_override(
        self, config: OptimizationJobConfiguration
    ) -> None:
        merged = merge_config_with_cli(config)
        assert merged.model_dump() == config.model_dump()

    def test_cli_values_override(self, config: OptimizationJobConfiguration) -> None:
        merged = merge_config_with_cli(
            config,
            kerf_width=3.5,
            output_format="summary",
            output_file=Path("out/result.json"),
        )

        assert merged.parameters.kerf_width == 3.5
        assert merged.output.format == "summary"
        assert merged.output.output_file == str(Path("out/result.json"))
        assert config.parameters.kerf_width == 2.0

    def test_invalid_override_rejected(self, config: OptimizationJobConfiguration) -> None:
        with pytest.raises(ValueError):
            merge_config_with_cli(config, output_format="pdf")

    def test_config_to_inputs(self, config: OptimizationJobConfiguration) -> None:
        stock_inputs, cut_inputs, params_input = config_to_inputs(config)

        assert stock_inputs == [StockInput(length=6000, quantity=10, material="steel")]
        assert cut_inputs[2] == CutInput(length=2400, quantity=4)
        assert params_input == ParametersInput(kerf_width=2.0)
