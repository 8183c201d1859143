"""
Configuration management with typed Pydantic models.

Provides data path resolution and environment-aware configuration loading.
"""

from rideshare.config.loader import load_config
from rideshare.config.settings import (
    DATASETS,
    DataPathsConfig,
    LoggingConfig,
    RideShareConfig,
)

__all__ = [
    "DATASETS",
    "DataPathsConfig",
    "LoggingConfig",
    "RideShareConfig",
    "load_config",
]
