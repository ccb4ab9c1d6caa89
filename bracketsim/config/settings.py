"""
Strongly typed configuration using pydantic-settings.

All settings are validated at startup and loaded from:
1. Default values defined here
2. .env file (if present)
3. Environment variables (highest priority)

Environment variable naming:
- SimulationSettings: BRACKET_REGIONS, BRACKET_ROUND_NAMES, BRACKET_FIELD_SIZE
- ObservabilitySettings: ENVIRONMENT, LOG_LEVEL, LOG_FORMAT (no prefix)

List values are read from the environment as JSON, e.g.
BRACKET_REGIONS='["South", "East"]'.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


DEFAULT_REGIONS = ["South", "East", "West", "Midwest"]
DEFAULT_ROUND_NAMES = ["2nd Round", "3rd Round", "Sweet Sixteen", "Elite Eight"]


class SimulationSettings(BaseSettings):
    """Bracket shape and region settings."""

    model_config = SettingsConfigDict(env_prefix="BRACKET_")

    field_size: int = Field(default=16, ge=2, le=1024, description="Entrants per region")
    regions: List[str] = Field(default_factory=lambda: list(DEFAULT_REGIONS), min_length=1)
    round_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ROUND_NAMES), min_length=1, validate_default=True
    )

    @field_validator('field_size')
    @classmethod
    def field_size_power_of_two(cls, v):
        if v & (v - 1):
            raise ValueError('field_size must be a power of two')
        return v

    @field_validator('round_names')
    @classmethod
    def one_name_per_round(cls, v, info):
        field_size = info.data.get('field_size')
        if field_size is not None and len(v) != field_size.bit_length() - 1:
            raise ValueError('round_names must name every round of the field')
        return v

    @property
    def num_rounds(self) -> int:
        """Number of rounds needed to reduce the field to one winner."""
        return self.field_size.bit_length() - 1


class ObservabilitySettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="")  # Direct: ENVIRONMENT, LOG_LEVEL

    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    # None: json in production, console elsewhere
    log_format: Optional[str] = Field(default=None, pattern="^(console|json)$")


class Settings(BaseSettings):
    """
    Root settings aggregating all subsections.

    Usage:
        from bracketsim.config import get_settings

        settings = get_settings()
        settings.simulation.regions
        settings.observability.log_level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
