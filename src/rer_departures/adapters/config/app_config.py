"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

import pytz
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rer_departures.domain.models.line_configuration import LineConfiguration

# TOML [line] keys that may override environment settings
LINE_TOML_KEYS = (
    "timezone",
    "network",
    "line_code",
    "mission_placeholder",
    "default_origin_id",
    "default_destination_id",
    "max_results",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # Navitia API configuration
    navitia_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("navitia_api_key", "sncf_api_key", "api_sncf_key"),
        description="Navitia API key (NAVITIA_API_KEY, SNCF_API_KEY or API_SNCF_KEY)",
    )
    navitia_base_url: str = Field(
        default="https://api.navitia.io/v1", description="Base URL of the Navitia API"
    )
    navitia_coverage: str = Field(default="sncf", description="Navitia coverage region")
    request_timeout_seconds: float = Field(
        default=10.0, description="Timeout for Navitia API requests in seconds"
    )

    # Line configuration
    timezone: str = Field(
        default="Europe/Paris",
        description="Home timezone of the transit network (IANA timezone name)",
    )
    network: str = Field(default="RER", description="Network name used to filter departures")
    line_code: str = Field(default="C", description="Line code used to filter departures")
    mission_placeholder: str = Field(
        default="----", description="Mission shown when no identifier can be extracted"
    )
    default_origin_id: str = Field(
        default="stop_area:SNCF:87758011", description="Default origin stop area"
    )
    default_destination_id: str = Field(
        default="stop_area:SNCF:87393843", description="Default destination stop area"
    )
    max_results: int = Field(default=6, description="Maximum records returned per request")

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Optional TOML file overriding the line settings
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with a [line] table",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        if v not in pytz.all_timezones_set:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'")
        return v

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        """Validate max_results is positive."""
        if v < 1:
            raise ValueError("max_results must be at least 1")
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_line_overrides(self) -> dict[str, Any]:
        """Return the [line] table of the TOML file, restricted to known keys."""
        toml_data = self._load_toml_data()
        line = toml_data.get("line", {})
        if not isinstance(line, dict):
            raise ValueError("TOML config 'line' must be a table")
        return {key: line[key] for key in LINE_TOML_KEYS if key in line}

    def to_line_configuration(self) -> LineConfiguration:
        """Build the domain line configuration, TOML values taking precedence."""
        values: dict[str, Any] = {key: getattr(self, key) for key in LINE_TOML_KEYS}
        values.update(self.get_line_overrides())

        if values["timezone"] not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone in config file: {values['timezone']}")
        max_results = int(values["max_results"])
        if max_results < 1:
            raise ValueError("max_results must be at least 1")

        return LineConfiguration(
            timezone=str(values["timezone"]),
            network=str(values["network"]),
            line_code=str(values["line_code"]),
            mission_placeholder=str(values["mission_placeholder"]),
            default_origin_id=str(values["default_origin_id"]),
            default_destination_id=str(values["default_destination_id"]),
            max_results=max_results,
        )
