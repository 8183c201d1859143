"""
Schema registry for discovery by dataset name.

Pairs each raw table schema with the entity built from its rows.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import pandera.pandas as pa

from rideshare.domain.entities import Driver, Entity, Rider, Trip
from rideshare.schemas.records import (
    DriverRecordSchema,
    RiderRecordSchema,
    TripRecordSchema,
)

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class SchemaInfo:
    """Metadata about a registered schema."""

    name: str
    schema: type[pa.DataFrameModel]
    entity: type[Entity]
    description: str

    @property
    def columns(self) -> tuple[str, ...]:
        """Column order expected by the entity's row constructor."""
        return self.entity.columns


class SchemaRegistry:
    """Centralized registry for the raw table schemas."""

    _schemas: ClassVar[dict[str, SchemaInfo]] = {
        "drivers": SchemaInfo(
            name="drivers",
            schema=DriverRecordSchema,
            entity=Driver,
            description="Drivers and their vehicles",
        ),
        "riders": SchemaInfo(
            name="riders",
            schema=RiderRecordSchema,
            entity=Rider,
            description="Riders and their contact numbers",
        ),
        "trips": SchemaInfo(
            name="trips",
            schema=TripRecordSchema,
            entity=Trip,
            description="Completed trips linking a driver and a rider",
        ),
    }

    @classmethod
    def get(cls, name: str) -> type[pa.DataFrameModel]:
        """
        Get a schema by dataset name.

        Raises:
            KeyError: If schema not found.
        """
        return cls.get_info(name).schema

    @classmethod
    def get_info(cls, name: str) -> SchemaInfo:
        """Get full schema info by dataset name."""
        if name not in cls._schemas:
            available = ", ".join(cls._schemas.keys())
            msg = f"Unknown schema '{name}'. Available: {available}"
            raise KeyError(msg)
        return cls._schemas[name]

    @classmethod
    def list_schemas(cls) -> list[str]:
        """List all registered schema names."""
        return list(cls._schemas.keys())

    @classmethod
    def validate(cls, df: "pd.DataFrame", schema_name: str) -> "pd.DataFrame":
        """
        Validate a DataFrame against a registered schema.

        Raises:
            pandera.errors.SchemaError: If validation fails.
        """
        return cls.get(schema_name).validate(df)
