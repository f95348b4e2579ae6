"""
Tests for configuration loading and validation.
"""

import os
from datetime import datetime
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from airport_ops.utils.config import AirportConfig, get_config, load_config, reset_config


class TestAirportConfig:
    """Test cases for AirportConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = AirportConfig()

        assert config.log_level == "WARNING"
        assert config.debug is False
        assert config.datetime_format == "%Y-%m-%d %H:%M"
        assert config.display_format == "%H:%M %d/%m/%Y"
        assert config.strict_plane_ids is False

    def test_log_level_normalized(self):
        assert AirportConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AirportConfig(log_level="LOUD")

    def test_invalid_time_format(self):
        with pytest.raises(ValidationError):
            AirportConfig(datetime_format="yyyy-MM-dd")

    def test_parse_time(self):
        """Both space and ISO 'T' separators are accepted."""
        config = AirportConfig()
        expected = datetime(2025, 3, 14, 9, 30)
        assert config.parse_time("2025-03-14 09:30") == expected
        assert config.parse_time("2025-03-14T09:30") == expected
        with pytest.raises(ValueError):
            config.parse_time("14/03/2025")


class TestLoadConfig:
    """Test loading from the environment and .env files."""

    @patch.dict(os.environ, {
        "AIRPORT_LOG_LEVEL": "info",
        "AIRPORT_DEBUG": "yes",
        "AIRPORT_STRICT_PLANE_IDS": "1",
    })
    def test_from_environment(self):
        config = load_config()

        assert config.log_level == "INFO"
        assert config.debug is True
        assert config.strict_plane_ids is True

    @patch.dict(os.environ, {"AIRPORT_LOG_LEVEL": "chatty"})
    def test_invalid_environment(self):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config()

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / "airport.env"
        env_file.write_text("AIRPORT_STRICT_PLANE_IDS=true\nAIRPORT_DISPLAY_FORMAT=%d/%m %H:%M\n")

        with patch.dict(os.environ, {}):
            config = load_config(str(env_file))

        assert config.strict_plane_ids is True
        assert config.display_format == "%d/%m %H:%M"

    def test_get_config_cached(self):
        """get_config() returns one instance until reset."""
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
