"""Tests for the file dataset repository adapter."""

from pathlib import Path

import pytest

from roadtrip.adapters.datasets import FileDatasetRepository, parse_border_line
from roadtrip.config import DatasetConfig
from roadtrip.domain.errors import DatasetError
from roadtrip.domain.models import BorderRecord, CapitalDistanceRecord, IdentityRecord


class TestParseBorderLine:
    """Test suite for borders.txt line parsing."""

    def test_neighbors_with_markers(self):
        record = parse_border_line("Albania = Greece 212 km; Kosovo 112 km\n")
        assert record == BorderRecord(
            name="Albania", neighbors=(("Greece", 212), ("Kosovo", 112))
        )

    def test_thousands_separator(self):
        record = parse_border_line("Brazil = Argentina 1,263 km")
        assert record is not None
        assert record.neighbors == (("Argentina", 1263),)

    def test_neighbor_without_marker(self):
        record = parse_border_line("Albania = Greece; Montenegro")
        assert record is not None
        assert record.neighbors == (("Greece", None), ("Montenegro", None))

    def test_country_without_neighbors(self):
        assert parse_border_line("Iceland") == BorderRecord(name="Iceland")
        assert parse_border_line("Iceland = ") == BorderRecord(name="Iceland")

    def test_blank_line(self):
        assert parse_border_line("   \n") is None

    def test_missing_names_are_malformed(self):
        with pytest.raises(ValueError):
            parse_border_line(" = Greece 212 km")
        with pytest.raises(ValueError):
            parse_border_line("Albania = 212 km")


class TestFileDatasetRepository:
    """Test suite for FileDatasetRepository."""

    def test_identity_records(self, repository):
        records = repository.load_identity_records()

        assert records[0] == IdentityRecord("ALB", "Albania", "2020-12-31")
        assert IdentityRecord("YUG", "Yugoslavia", "2006-06-04") in records
        assert len(records) == 20

    def test_border_records(self, repository):
        records = repository.load_border_records()

        assert records[0].name == "Albania"
        assert records[0].neighbors[0] == ("Greece", 212)
        assert BorderRecord(name="Iceland") in records

    def test_distance_records(self, repository):
        records = repository.load_distance_records()

        assert records[0] == CapitalDistanceRecord("ALB", "GRC", 360)
        assert CapitalDistanceRecord("UK", "IRE", 464) in records

    def test_records_are_cached(self, repository):
        first = repository.load_border_records()
        assert repository.load_border_records() is first

        repository.clear_cache()
        assert repository.load_border_records() is not first

    def test_missing_file_raises_dataset_error(self, tmp_path: Path):
        repository = FileDatasetRepository(DatasetConfig(data_dir=tmp_path))

        with pytest.raises(DatasetError) as exc_info:
            repository.load_border_records()

        assert exc_info.value.file_path == str(tmp_path / "borders.txt")
        assert isinstance(exc_info.value.cause, OSError)

    def test_malformed_distance_row(self, tmp_path: Path):
        (tmp_path / "capdist.csv").write_text(
            "numa,ida,numb,idb,kmdist,midist\n"
            "339,ALB,350,GRC,360,224\n"
            "350,GRC,339,ALB,far,224\n",
            encoding="utf-8",
        )
        repository = FileDatasetRepository(DatasetConfig(data_dir=tmp_path))

        with pytest.raises(DatasetError) as exc_info:
            repository.load_distance_records()

        assert exc_info.value.line_number == 3

    def test_short_identity_row(self, tmp_path: Path):
        (tmp_path / "state_name.tsv").write_text(
            "statenumber\tstateid\tcountryname\tstart\tend\n339\tALB\tAlbania\n",
            encoding="utf-8",
        )
        repository = FileDatasetRepository(DatasetConfig(data_dir=tmp_path))

        with pytest.raises(DatasetError) as exc_info:
            repository.load_identity_records()

        assert exc_info.value.line_number == 2

    def test_malformed_border_line(self, tmp_path: Path):
        (tmp_path / "borders.txt").write_text(
            "Albania = Greece 212 km\n\nSerbia = 151 km\n", encoding="utf-8"
        )
        repository = FileDatasetRepository(DatasetConfig(data_dir=tmp_path))

        with pytest.raises(DatasetError) as exc_info:
            repository.load_border_records()

        assert exc_info.value.line_number == 3

    def test_negative_distance_row(self, tmp_path: Path):
        (tmp_path / "capdist.csv").write_text(
            "numa,ida,numb,idb,kmdist,midist\n339,ALB,350,GRC,-5,-3\n",
            encoding="utf-8",
        )
        repository = FileDatasetRepository(DatasetConfig(data_dir=tmp_path))

        with pytest.raises(DatasetError) as exc_info:
            repository.load_distance_records()

        assert exc_info.value.file_path == str(tmp_path / "capdist.csv")
        assert exc_info.value.line_number == 2
