"""
Configuration module with strongly typed settings.

Usage:
    from bracketsim.config import get_settings

    settings = get_settings()
    print(settings.simulation.regions)
    print(settings.observability.log_level)
"""
from functools import lru_cache

from .settings import (
    Settings,
    SimulationSettings,
    ObservabilitySettings,
    DEFAULT_REGIONS,
    DEFAULT_ROUND_NAMES,
)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and validate settings once per process."""
    return Settings()


__all__ = [
    "get_settings",
    "Settings",
    "SimulationSettings",
    "ObservabilitySettings",
    "DEFAULT_REGIONS",
    "DEFAULT_ROUND_NAMES",
]
