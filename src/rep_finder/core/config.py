"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Roster
    legislators_file: str = Field(
        default="legislators-current.yaml",
        description="Path to the congress-legislators YAML roster",
    )

    # ZIP -> centroid geocoder (Zippopotam.us)
    zip_geocoder_base_url: str = Field(
        default="https://api.zippopotam.us",
        description="Base URL for the ZIP centroid service",
    )
    zip_geocoder_timeout: float = Field(
        default=10.0,
        description="ZIP centroid request timeout in seconds",
        gt=0,
    )

    # Centroid -> geographies (US Census Bureau)
    census_geographies_url: str = Field(
        default="https://geocoding.geo.census.gov/geocoder/geographies/coordinates",
        description="Census coordinates-to-geographies endpoint",
    )
    census_benchmark: str = Field(
        default="Public_AR_Current",
        description="Census geocoder benchmark",
    )
    census_vintage: str = Field(
        default="Current_Current",
        description="Census geocoder vintage",
    )
    census_timeout: float = Field(
        default=30.0,
        description="Census request timeout in seconds",
        gt=0,
    )

    # Representatives
    photo_url_template: str = Field(
        default="https://bioguide.congress.gov/photo/{bioguide}.jpg",
        description="Photo URL template parameterized by bioguide ID",
    )

    @field_validator("photo_url_template")
    @classmethod
    def validate_photo_url_template(cls, v: str) -> str:
        if "{bioguide}" not in v:
            msg = "photo_url_template must contain the {bioguide} placeholder"
            raise ValueError(msg)
        return v

    admin_reload_enabled: bool = Field(
        default=True,
        description="Expose the roster reload endpoint",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Write stderr logs as JSON lines",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
