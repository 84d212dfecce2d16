"""Tests for configuration loading and error reporting."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from platecut.application.config import (
    ConfigError,
    format_location,
    load_config,
    load_config_from_dict,
)


class TestFormatLocation:
    """Tests for format_location."""

    def test_dotted_path(self) -> None:
        assert format_location(("plate", "width")) == "plate.width"

    def test_list_index(self) -> None:
        assert format_location(("requests", 2, "width")) == "requests[2].width"

    def test_leading_index(self) -> None:
        assert format_location((0, "id")) == "[0].id"


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "kitchen.json")
        assert config.plate.width == 1200
        assert config.requests[0].quantity == 5

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "line" in error.details[0]

    def test_validation_error_names_offending_request(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_width.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "requests[0].width"
        assert "requests[0].width" in error.message
        assert error.path == fixtures_path / "invalid_width.json"

    def test_round_trip_through_file(self, tmp_path: Path) -> None:
        path = tmp_path / "plates.json"
        path.write_text(
            json.dumps(
                {
                    "plate": {"width": 100, "height": 100},
                    "requests": [{"id": "a", "width": 10, "height": 10}],
                    "options": {"allow_rotation": True},
                }
            )
        )
        config = load_config(path)
        assert config.options.allow_rotation is True


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_duplicate_id_reported_as_validation_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {
                    "plate": {"width": 100, "height": 100},
                    "requests": [
                        {"id": 1, "width": 10, "height": 10},
                        {"id": 1, "width": 20, "height": 20},
                    ],
                }
            )
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "requests"
        assert "duplicate request id" in error.details[0]["message"]

    def test_missing_plate_width(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"plate": {"height": 100}})
        assert exc_info.value.details[0]["path"] == "plate.width"
