"""Tests for config parsing and validation."""

import logging

import pytest

from zest.config import RunConfig, parse_config, parse_config_data, validate_config
from zest.errors import ConfigError


class TestParseConfig:
    def test_full_file(self, tmp_path):
        path = tmp_path / "zest.yaml"
        path.write_text(
            "color: NEVER\n"
            "log-level: error\n"
            "show_traces: false\n"
            "pattern: '*_spec.py'\n"
            "unknown: ignored\n",
            encoding="utf-8",
        )

        config = parse_config(path)

        assert config.color == "never"
        assert config.log_level == "error"
        assert config.log_level_number == logging.ERROR
        assert config.show_traces is False
        assert config.pattern == ["*_spec.py"]

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "zest.yaml"
        path.write_text("", encoding="utf-8")

        assert parse_config(path) == RunConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_config(tmp_path / "zest.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "zest.yaml"
        path.write_text("color: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            parse_config(path)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            parse_config_data(["color"])

    def test_wrong_types(self):
        with pytest.raises(ConfigError):
            parse_config_data({"show_traces": "yes"})
        with pytest.raises(ConfigError):
            parse_config_data({"pattern": [1, 2]})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_config_data("nope")


class TestValidateConfig:
    def test_defaults_are_valid(self):
        result = validate_config(RunConfig())
        assert result.valid
        assert str(result) == "Valid"

    def test_invalid_values(self):
        result = validate_config(RunConfig(color="sometimes", log_level="loud", pattern=[]))

        assert not result.valid
        assert {e.path for e in result.errors} == {"color", "log_level", "pattern"}
        assert len(result.errors) == 3
        assert str(result) == "Invalid: 3 errors, 0 warnings"

    def test_non_python_pattern_warns(self):
        result = validate_config(RunConfig(pattern=["*.txt"]))

        assert result.valid
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "pattern[0]"
        assert str(result) == "Valid (1 warnings)"
