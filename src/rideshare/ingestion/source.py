"""
Raw record sources.

A source hands out the three tables as ordered sequences of string tuples,
header first. It does no type conversion; that is the entities' job.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import pandas as pd
import pandera.pandas as pa

from rideshare.config.settings import DataPathsConfig
from rideshare.schemas.registry import SchemaRegistry
from rideshare.utils.logging import get_logger

log = get_logger(__name__)

Row = tuple[str, ...]


@runtime_checkable
class RawRecordSource(Protocol):
    """Supplier of raw driver, rider and trip rows (header row first)."""

    def driver_rows(self) -> Sequence[Row]: ...

    def rider_rows(self) -> Sequence[Row]: ...

    def trip_rows(self) -> Sequence[Row]: ...


def read_table(path: Path, dataset: str) -> pd.DataFrame:
    """
    Read one CSV export and check it against its raw schema.

    Every column is read as text and empty cells stay empty strings, so
    that nothing is converted before the entities see it.

    Args:
        path: CSV file to read.
        dataset: Registered schema name ("drivers", "riders" or "trips").

    Returns:
        DataFrame holding the schema's columns in entity column order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the table does not satisfy its schema.
    """
    if not path.exists():
        msg = f"{dataset.capitalize()} file not found: {path}"
        raise FileNotFoundError(msg)

    log.debug("Reading table", dataset=dataset, path=str(path))
    df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")

    try:
        df = SchemaRegistry.validate(df, dataset)
    except pa.errors.SchemaError as e:
        msg = f"{path} does not match the {dataset} schema: {e}"
        raise ValueError(msg) from e

    return df[list(SchemaRegistry.get_info(dataset).columns)]


def to_rows(df: pd.DataFrame) -> list[Row]:
    """Header tuple followed by one tuple per data row."""
    header = tuple(str(column) for column in df.columns)
    return [header, *(tuple(row) for row in df.itertuples(index=False, name=None))]


class CsvRecordSource:
    """Reads the three CSV exports configured in DataPathsConfig."""

    def __init__(self, data_paths: DataPathsConfig) -> None:
        """
        Initialize CSV source.

        Args:
            data_paths: Where the drivers, riders and trips files live.
        """
        self.data_paths = data_paths

    def _rows(self, dataset: str) -> list[Row]:
        return to_rows(read_table(self.data_paths.resolve(dataset), dataset))

    def driver_rows(self) -> list[Row]:
        """Driver rows: id, name, vin."""
        return self._rows("drivers")

    def rider_rows(self) -> list[Row]:
        """Rider rows: id, name, phone."""
        return self._rows("riders")

    def trip_rows(self) -> list[Row]:
        """Trip rows: id, driver_id, rider_id, date, rating."""
        return self._rows("trips")


class InMemoryRecordSource:
    """Source backed by rows held in memory, e.g. from another store."""

    def __init__(
        self,
        drivers: Sequence[Row] = (),
        riders: Sequence[Row] = (),
        trips: Sequence[Row] = (),
    ) -> None:
        self._drivers = tuple(drivers)
        self._riders = tuple(riders)
        self._trips = tuple(trips)

    def driver_rows(self) -> Sequence[Row]:
        return self._drivers

    def rider_rows(self) -> Sequence[Row]:
        return self._riders

    def trip_rows(self) -> Sequence[Row]:
        return self._trips
