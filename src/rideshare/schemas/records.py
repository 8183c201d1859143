"""
Pandera schemas for the raw CSV tables.

These describe the shape of the export files only: the required columns are
present and every cell is a string. Type coercion and field rules belong to
the entities in rideshare.domain.entities.
"""

import pandera.pandas as pa
from pandera.typing import Series


class DriverRecordSchema(pa.DataFrameModel):
    """Raw driver table: one row per driver."""

    id: Series[str] = pa.Field(description="Driver id, positive integer as text")
    name: Series[str] = pa.Field(description="Driver full name")
    vin: Series[str] = pa.Field(description="Vehicle identification number")

    class Config:
        """Schema configuration."""

        name = "DriverRecordSchema"
        strict = False  # Allow extra columns
        coerce = True


class RiderRecordSchema(pa.DataFrameModel):
    """Raw rider table: one row per rider."""

    id: Series[str] = pa.Field(description="Rider id, positive integer as text")
    name: Series[str] = pa.Field(description="Rider full name")
    phone: Series[str] = pa.Field(description="Contact phone number")

    class Config:
        """Schema configuration."""

        name = "RiderRecordSchema"
        strict = False
        coerce = True


class TripRecordSchema(pa.DataFrameModel):
    """Raw trip table: one row per completed trip."""

    id: Series[str] = pa.Field(description="Trip id, non-negative integer as text")
    driver_id: Series[str] = pa.Field(description="References DriverRecordSchema.id")
    rider_id: Series[str] = pa.Field(description="References RiderRecordSchema.id")
    date: Series[str] = pa.Field(description="Trip date, YYYY-MM-DD")
    rating: Series[str] = pa.Field(description="Rider's rating, 1 to 5")

    class Config:
        """Schema configuration."""

        name = "TripRecordSchema"
        strict = False
        coerce = True
