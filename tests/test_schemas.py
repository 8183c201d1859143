"""Tests for Pandera raw table schemas."""

import pandas as pd
import pandera.pandas as pa
import pytest

from rideshare.domain import Driver, Trip
from rideshare.schemas import DriverRecordSchema, SchemaRegistry, TripRecordSchema


class TestDriverRecordSchema:
    """Tests for DriverRecordSchema."""

    def test_valid_table(self) -> None:
        """Test a well-formed table passes."""
        df = pd.DataFrame({"id": ["1", "2"], "name": ["Ada", "Grace"], "vin": ["V1", "V2"]})
        assert len(DriverRecordSchema.validate(df)) == 2

    def test_missing_column(self) -> None:
        """Test a missing column fails."""
        df = pd.DataFrame({"id": ["1"], "name": ["Ada"]})
        with pytest.raises(pa.errors.SchemaError):
            DriverRecordSchema.validate(df)

    def test_extra_columns_allowed(self) -> None:
        """Test unknown columns are tolerated."""
        df = pd.DataFrame(
            {"id": ["1"], "name": ["Ada"], "vin": ["V1"], "color": ["red"]}
        )
        assert "color" in DriverRecordSchema.validate(df).columns


class TestTripRecordSchema:
    """Tests for TripRecordSchema."""

    def test_cells_stay_text(self) -> None:
        """Test the raw schema does no numeric or date conversion."""
        df = pd.DataFrame(
            {
                "id": ["1"],
                "driver_id": ["2"],
                "rider_id": ["3"],
                "date": ["2016-04-05"],
                "rating": ["5"],
            }
        )
        result = TripRecordSchema.validate(df)
        assert result.loc[0, "rating"] == "5"
        assert result.loc[0, "date"] == "2016-04-05"


class TestSchemaRegistry:
    """Tests for SchemaRegistry."""

    def test_list_schemas(self) -> None:
        """Test every dataset is registered."""
        assert SchemaRegistry.list_schemas() == ["drivers", "riders", "trips"]

    def test_get_info(self) -> None:
        """Test schema info pairs a schema with its entity."""
        info = SchemaRegistry.get_info("trips")
        assert info.schema is TripRecordSchema
        assert info.entity is Trip
        assert info.columns == ("id", "driver_id", "rider_id", "date", "rating")

    def test_get(self) -> None:
        """Test schema lookup by name."""
        assert SchemaRegistry.get("drivers") is DriverRecordSchema
        assert SchemaRegistry.get_info("drivers").entity is Driver

    def test_unknown_schema(self) -> None:
        """Test lookup of an unregistered name fails."""
        with pytest.raises(KeyError, match="Unknown schema"):
            SchemaRegistry.get("vehicles")

    def test_validate(self) -> None:
        """Test validation through the registry."""
        df = pd.DataFrame({"id": ["1"], "name": ["Ada"], "phone": ["555"]})
        assert len(SchemaRegistry.validate(df, "riders")) == 1
