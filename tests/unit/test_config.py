"""Unit tests for configuration schema, loader and adapter.

These tests verify:
- Valid configurations are loaded correctly
- Dimension constraints match the domain boundary rules
- Unknown fields are rejected (extra="forbid")
- Schema version validation
- Loader error handling (file not found, JSON parse errors)
- Conversion to domain values
"""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from panelcut.application.config import (
    CabinetConfig,
    ConfigError,
    MaterialConfig,
    OutputFormat,
    ProjectConfiguration,
    config_to_cabinets,
    config_to_material,
    load_config,
    load_config_from_dict,
)
from panelcut.application.config.loader import _format_json_path
from panelcut.domain import (
    Cabinet,
    DoorStyle,
    Material,
    MaterialType,
    validate_cabinet,
    validate_material,
)

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def minimal_config(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "cabinets": [{"height": 720, "width": 600, "depth": 580}],
    }
    data.update(overrides)
    return data


class TestMaterialConfig:
    """Tests for MaterialConfig model."""

    def test_defaults(self) -> None:
        config = MaterialConfig()
        assert config.type == MaterialType.MDF
        assert (config.thickness, config.width, config.height, config.kerf) == (
            18.0,
            2440.0,
            1220.0,
            3.0,
        )

    @pytest.mark.parametrize("field", ["thickness", "width", "height", "kerf"])
    def test_non_positive_rejected(self, field: str) -> None:
        with pytest.raises(PydanticValidationError):
            MaterialConfig(**{field: 0})

    def test_unknown_material_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            MaterialConfig(type="oak")


class TestCabinetConfig:
    """Tests for CabinetConfig model."""

    def test_dimensions_required(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetConfig(height=720, width=600)
        assert any(e["loc"] == ("depth",) for e in exc_info.value.errors())

    def test_defaults(self) -> None:
        config = CabinetConfig(height=720, width=600, depth=580)
        assert config.divisions == 1
        assert config.quantity == 1
        assert config.door_style == DoorStyle.FULL_OVERLAY

    def test_door_style_from_string(self) -> None:
        config = CabinetConfig(height=720, width=600, depth=580, door_style="half-overlay")
        assert config.door_style == DoorStyle.HALF_OVERLAY

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -1},
            {"divisions": -1},
            {"drawer_spacing": -10},
            {"quantity": 0},
            {"divisions": 51},
            {"quantity": 101},
        ],
    )
    def test_out_of_range_rejected(self, overrides: dict[str, Any]) -> None:
        values = {"height": 720, "width": 600, "depth": 580, **overrides}
        with pytest.raises(PydanticValidationError):
            CabinetConfig(**values)

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            CabinetConfig(height=720, width=600, depth=580, colour="white")
        assert exc_info.value.errors()[0]["type"] == "extra_forbidden"

    def test_upper_bounds_inclusive(self) -> None:
        config = CabinetConfig(height=720, width=600, depth=580, divisions=50, quantity=100)
        assert (config.divisions, config.quantity) == (50, 100)

    def test_divisions_cap_reported_with_path(self) -> None:
        data = minimal_config(
            cabinets=[{"height": 720, "width": 600, "depth": 580, "divisions": 200000}]
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        detail = exc_info.value.details[0]
        assert detail["path"] == "cabinets[0].divisions"
        assert detail["error_type"] == "less_than_equal"

    def test_default_divisions_match_domain_cabinet(self) -> None:
        config = load_config_from_dict(minimal_config())
        assert config_to_cabinets(config)[0].divisions == Cabinet().divisions


class TestProjectConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = ProjectConfiguration.model_validate(minimal_config())
        assert config.name == "project"
        assert config.material == MaterialConfig()
        assert config.output.format == OutputFormat.ALL
        assert config.output.output_dir is None

    def test_cabinets_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(minimal_config(cabinets=[]))

    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported_versions(self, version: str) -> None:
        config = ProjectConfiguration.model_validate(minimal_config(schema_version=version))
        assert config.schema_version == version

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            ProjectConfiguration.model_validate(minimal_config(schema_version="2.0"))

    def test_malformed_version(self) -> None:
        with pytest.raises(PydanticValidationError):
            ProjectConfiguration.model_validate(minimal_config(schema_version="one"))


class TestFormatJsonPath:
    """Tests for _format_json_path."""

    def test_nested_fields(self) -> None:
        assert _format_json_path(("material", "width")) == "material.width"

    def test_list_index(self) -> None:
        assert _format_json_path(("cabinets", 0, "depth")) == "cabinets[0].depth"

    def test_leading_index(self) -> None:
        assert _format_json_path((2, "depth")) == "[2].depth"


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_file(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        assert config.name == "kitchen"
        assert config.material.type == MaterialType.PLYWOOD
        assert len(config.cabinets) == 2
        assert config.cabinets[1].door_style == DoorStyle.INSET
        assert config.output.format == OutputFormat.TEXT

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 4
        assert "Invalid JSON" in str(error)

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "cabinets[0].colour"

    def test_bad_dimensions_report_every_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "bad_dimension.json")
        paths = {d["path"] for d in exc_info.value.details}
        assert paths == {"material.width", "cabinets[0].width"}
        assert str(exc_info.value).startswith("Configuration validation failed:")

    def test_load_from_dict(self) -> None:
        config = load_config_from_dict(minimal_config(name="bath"))
        assert config.name == "bath"

    def test_load_from_dict_validation_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0"})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "cabinets"


class TestAdapter:
    """Tests for conversion to domain values."""

    def test_material(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        material = config_to_material(config)
        assert material == Material(
            type=MaterialType.PLYWOOD, thickness=18, width=2440, height=2440, kerf=3
        )

    def test_cabinets_keep_order(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        cabinets = config_to_cabinets(config)
        assert cabinets[0] == Cabinet(height=720, width=600, depth=580, divisions=1)
        assert cabinets[1].quantity == 2
        assert cabinets[1].door_style is DoorStyle.INSET

    def test_loaded_values_pass_domain_validation(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        validate_material(config_to_material(config))
        for cabinet in config_to_cabinets(config):
            validate_cabinet(cabinet)
