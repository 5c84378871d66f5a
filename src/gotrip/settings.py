from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VEHICLE_CLASS_NAMES = ("economy", "moto", "women", "comfort", "xl")


class PricingSettings(BaseSettings):
    currency: str = Field(default="PYG", min_length=3, max_length=3)
    vehicle_priority: str = Field(
        default=",".join(VEHICLE_CLASS_NAMES),
        description="Comma-separated display order of vehicle classes in estimates",
    )

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    @field_validator("vehicle_priority")
    @classmethod
    def validate_priority(cls, v: str) -> str:
        names = [name.strip() for name in v.split(",") if name.strip()]
        unknown = [name for name in names if name not in VEHICLE_CLASS_NAMES]
        if unknown:
            raise ValueError(f"Unknown vehicle classes in priority: {', '.join(unknown)}")
        if len(set(names)) != len(names):
            raise ValueError("Vehicle priority must not repeat a class")
        return ",".join(names)

    def priority_list(self) -> list[str]:
        return self.vehicle_priority.split(",")


class TripSettings(BaseSettings):
    search_timeout_seconds: int | None = Field(
        default=None,
        ge=1,
        description="Seconds a trip may stay in 'searching' before it counts as "
        "no-match. Unset means searching never expires on its own.",
    )

    model_config = SettingsConfigDict(env_prefix="TRIP_")


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class APISettings(BaseSettings):
    key: str = ""
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    model_config = SettingsConfigDict(env_prefix="API_")


class CORSSettings(BaseSettings):
    origins: str = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(env_prefix="CORS_")


class Settings(BaseSettings):
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    trips: TripSettings = Field(default_factory=TripSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: APISettings = Field(default_factory=APISettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
