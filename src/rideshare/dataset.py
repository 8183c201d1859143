"""
Dataset loading.

Loads the three registries from one source in a single step and keeps
them together, so callers build queries from one owned object.
"""

from dataclasses import dataclass

from rideshare.config.settings import RideShareConfig
from rideshare.domain.queries import RelationalQueries
from rideshare.domain.registry import DriverRegistry, RiderRegistry, TripRegistry
from rideshare.ingestion.source import CsvRecordSource, RawRecordSource
from rideshare.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass(frozen=True)
class RideShareDataset:
    """Drivers, riders and trips loaded from the same source."""

    drivers: DriverRegistry
    riders: RiderRegistry
    trips: TripRegistry

    @property
    def queries(self) -> RelationalQueries:
        """Relational queries over this dataset."""
        return RelationalQueries(self.drivers, self.riders, self.trips)


def load_dataset(source: RawRecordSource) -> RideShareDataset:
    """
    Load every registry from a source.

    Either all three registries load or an error propagates; a partially
    loaded dataset is never returned.

    Raises:
        ValueError: If any row fails validation.
    """
    with log_context(source=type(source).__name__):
        dataset = RideShareDataset(
            drivers=DriverRegistry.load_all(source),
            riders=RiderRegistry.load_all(source),
            trips=TripRegistry.load_all(source),
        )
        log.info("Dataset loaded")
    return dataset


def load_dataset_from_config(config: RideShareConfig) -> RideShareDataset:
    """Load the dataset from the CSV files named in the configuration."""
    return load_dataset(CsvRecordSource(config.data_paths))
