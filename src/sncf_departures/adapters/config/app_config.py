"""12-factor configuration adapter using environment variables."""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sncf_departures.adapters.sncf_api.constants import (
    DEFAULT_QUERY_DATETIME,
    DEFAULT_STOP_AREA_ID,
    SNCF_BASE_URL,
    STOP_AREA_PREFIX,
)

QUERY_DATETIME_PATTERN = re.compile(r"^\d{8}T\d{6}$")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    title: str = Field(default="Départs SNCF", description="Title displayed above the departures")

    # SNCF API configuration
    sncf_api_base_url: str = Field(
        default=SNCF_BASE_URL,
        description="Base URL of the Navitia coverage serving the station",
    )
    sncf_api_key: str = Field(
        default="",
        description="API key sent verbatim in the Authorization header",
    )
    stop_area_id: str = Field(
        default=DEFAULT_STOP_AREA_ID,
        description="Stop area identifier without the 'stop_area:' prefix (e.g., 'SNCF:87686006')",
    )
    query_datetime: str = Field(
        default=DEFAULT_QUERY_DATETIME,
        description="Fixed datetime filter for the departures query (YYYYMMDDTHHMMSS)",
    )
    api_timeout_seconds: float | None = Field(
        default=None,
        description="Total timeout for the departures request; unset keeps the HTTP client default",
    )

    @field_validator("query_datetime")
    @classmethod
    def validate_query_datetime(cls, v: str) -> str:
        """Validate query datetime has the YYYYMMDDTHHMMSS shape."""
        if not QUERY_DATETIME_PATTERN.match(v):
            raise ValueError("query_datetime must be formatted as YYYYMMDDTHHMMSS")
        return v

    @field_validator("stop_area_id")
    @classmethod
    def validate_stop_area_id(cls, v: str) -> str:
        """Validate stop area id is set and given without its prefix."""
        v = v.strip()
        if not v:
            raise ValueError("stop_area_id must not be empty")
        if v.startswith(STOP_AREA_PREFIX):
            raise ValueError(f"stop_area_id must be given without the '{STOP_AREA_PREFIX}' prefix")
        return v

    @field_validator("sncf_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so paths can be appended safely."""
        return v.rstrip("/")
