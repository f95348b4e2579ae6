"""
Environment configuration loader with validation for the airport simulator.
"""

import logging
import os
from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")


class AirportConfig(BaseModel):
    """Configuration model for the airport simulator with validation."""

    model_config = ConfigDict(frozen=True)

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Time formats
    datetime_format: str = Field(
        default="%Y-%m-%d %H:%M",
        description="Format for flight times given on input and printed on tickets",
    )
    display_format: str = Field(
        default="%H:%M %d/%m/%Y", description="Format for flight times in listings"
    )

    # Flight registration
    strict_plane_ids: bool = Field(
        default=False,
        description="Require plane ids to be unique across arrivals and departures",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("datetime_format", "display_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Ensure a time format contains at least one directive."""
        if "%" not in v:
            raise ValueError(f"Time format has no strftime directives: {v!r}")
        datetime(2000, 1, 1).strftime(v)
        return v

    def parse_time(self, value: str) -> datetime:
        """Parse a flight time, accepting the ISO 'T' separator as well."""
        return datetime.strptime(value.strip().replace("T", " "), self.datetime_format)


def load_config(env_file: Optional[str] = None) -> AirportConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        AirportConfig: Validated configuration object

    Raises:
        ValueError: If configuration values are invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "log_level": os.getenv("AIRPORT_LOG_LEVEL", "WARNING"),
        "debug": os.getenv("AIRPORT_DEBUG", "false").lower() in TRUE_VALUES,
        "datetime_format": os.getenv("AIRPORT_DATETIME_FORMAT", "%Y-%m-%d %H:%M"),
        "display_format": os.getenv("AIRPORT_DISPLAY_FORMAT", "%H:%M %d/%m/%Y"),
        "strict_plane_ids": os.getenv("AIRPORT_STRICT_PLANE_IDS", "false").lower()
        in TRUE_VALUES,
    }

    try:
        config = AirportConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    logger.debug("Configuration loaded: %s", config)
    return config


# Global configuration instance
_config: Optional[AirportConfig] = None


def get_config() -> AirportConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        AirportConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
