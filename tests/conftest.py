"""Pytest configuration and shared fixtures."""

import csv
from pathlib import Path
from typing import Any

import pytest

from rideshare.config import DataPathsConfig, RideShareConfig
from rideshare.dataset import RideShareDataset, load_dataset
from rideshare.ingestion import CsvRecordSource


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def test_data_dir(project_root: Path) -> Path:
    """Return the sample data directory."""
    return project_root / "tests" / "data"


@pytest.fixture
def data_paths(test_data_dir: Path) -> DataPathsConfig:
    """Data paths pointing at the sample CSVs."""
    return DataPathsConfig(data_root=test_data_dir)


@pytest.fixture
def sample_config(data_paths: DataPathsConfig) -> RideShareConfig:
    """Configuration for the sample dataset."""
    return RideShareConfig(project="sample", data_paths=data_paths)


@pytest.fixture
def csv_source(data_paths: DataPathsConfig) -> CsvRecordSource:
    """CSV source over the sample dataset."""
    return CsvRecordSource(data_paths)


@pytest.fixture
def sample_dataset(csv_source: CsvRecordSource) -> RideShareDataset:
    """Fully loaded sample dataset."""
    return load_dataset(csv_source)


@pytest.fixture
def read_csv_rows(test_data_dir: Path) -> Any:
    """Read a sample CSV with the csv module, header included."""

    def _read(name: str) -> list[list[str]]:
        with (test_data_dir / name).open(encoding="utf-8", newline="") as f:
            return list(csv.reader(f))

    return _read


@pytest.fixture
def valid_driver() -> dict[str, Any]:
    """Field mapping for a valid driver."""
    return {"id": 4, "name": "Ada", "vin": "1XKAD49X2DJ395724"}


@pytest.fixture
def valid_rider() -> dict[str, Any]:
    """Field mapping for a valid rider."""
    return {"id": 8, "name": "Grace", "phone": "1-904-093-5211 x9183"}


@pytest.fixture
def valid_trip() -> dict[str, Any]:
    """Field mapping for a valid trip."""
    return {"id": 2, "driver_id": 4, "rider_id": 8, "date": "2014-07-12", "rating": 5}
