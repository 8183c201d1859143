"""
Schema definitions using Pandera for raw table validation.

The CSV exports are checked against these contracts before any row is
turned into an entity.
"""

from rideshare.schemas.records import (
    DriverRecordSchema,
    RiderRecordSchema,
    TripRecordSchema,
)
from rideshare.schemas.registry import SchemaInfo, SchemaRegistry

__all__ = [
    "DriverRecordSchema",
    "RiderRecordSchema",
    "SchemaInfo",
    "SchemaRegistry",
    "TripRecordSchema",
]
