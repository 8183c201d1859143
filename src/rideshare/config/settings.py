"""
Typed configuration models using Pydantic.

Data locations and logging behaviour are declared here; nothing in the
loading or query code hardcodes a path.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rideshare.utils.logging import VALID_LEVELS

DATASETS = ("drivers", "riders", "trips")


class DataPathsConfig(BaseModel):
    """Locations of the three CSV exports.

    File paths are relative to data_root. Use resolve() to get full paths.
    """

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("./data"), description="Root directory for all data files"
    )
    drivers: Path = Field(
        default=Path("drivers.csv"), description="Driver CSV (id,name,vin)"
    )
    riders: Path = Field(
        default=Path("riders.csv"), description="Rider CSV (id,name,phone)"
    )
    trips: Path = Field(
        default=Path("trips.csv"),
        description="Trip CSV (id,driver_id,rider_id,date,rating)",
    )

    def resolve(self, dataset: str) -> Path:
        """Resolve a dataset path against data_root."""
        if dataset not in DATASETS:
            msg = f"Unknown dataset '{dataset}'. Available: {', '.join(DATASETS)}"
            raise ValueError(msg)
        return self.data_root / getattr(self, dataset)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in VALID_LEVELS:
            msg = f"level must be one of {', '.join(VALID_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class RideShareConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(default="rideshare", description="Project identifier")
    data_paths: DataPathsConfig = Field(default_factory=DataPathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_root(self) -> Path:
        """Convenience accessor for the data root."""
        return self.data_paths.data_root
