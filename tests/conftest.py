"""Shared pytest fixtures for the road trip tests."""

from pathlib import Path

import pytest

from roadtrip.adapters.datasets import FileDatasetRepository
from roadtrip.config import DatasetConfig, reset_config
from roadtrip.services import RoadTripService

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no test sees configuration cached by another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def dataset_config() -> DatasetConfig:
    return DatasetConfig(data_dir=DATA_DIR)


@pytest.fixture
def repository(dataset_config: DatasetConfig) -> FileDatasetRepository:
    return FileDatasetRepository(dataset_config)


@pytest.fixture
def service(repository: FileDatasetRepository) -> RoadTripService:
    """Service built from the sample Balkans / Koreas / West Africa data."""
    return RoadTripService.from_repository(repository)
