"""File dataset repository adapter.

Reads the three source datasets from disk:
- state_name.tsv: tab-separated, header row, columns 1/2/4 hold the
  country id, its name and the end date of the record's validity
- borders.txt: one "Country = Neighbor 123 km; Other 45 km" line per
  country
- capdist.csv: comma-separated, header row, columns 1/3/4 hold the two
  country codes and the capital-to-capital distance in kilometers

Any unreadable file or malformed row raises DatasetError.
"""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    TextIO,
    Tuple,
)

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetError
from ...domain.models import BorderRecord, CapitalDistanceRecord, IdentityRecord
from ...identity.aliases import strip_distance_marker

_MARKER = re.compile(r"\d[\d,]*")


def parse_border_line(line: str) -> Optional[BorderRecord]:
    """Parse one borders.txt line; blank lines give None.

    Raises:
        ValueError: If the country or one of its neighbors has no name.
    """
    line = line.strip()
    if not line:
        return None

    name, _, rest = line.partition("=")
    name = name.strip()
    if not name:
        raise ValueError(f"Missing country name in {line!r}")

    neighbors: List[Tuple[str, Optional[int]]] = []
    for segment in rest.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        neighbor = strip_distance_marker(segment)
        if not neighbor:
            raise ValueError(f"Missing neighbor name in {segment!r}")
        marker = _MARKER.search(segment)
        neighbors.append(
            (neighbor, int(marker.group().replace(",", "")) if marker else None)
        )

    return BorderRecord(name=name, neighbors=tuple(neighbors))


@dataclass
class FileDatasetRepository:
    """Dataset repository that reads the three source files.

    This adapter implements DatasetRepositoryPort.

    Attributes:
        config: Dataset configuration (paths, file names)
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().datasets)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _identities: Optional[Tuple[IdentityRecord, ...]] = field(default=None, repr=False)
    _borders: Optional[Tuple[BorderRecord, ...]] = field(default=None, repr=False)
    _distances: Optional[Tuple[CapitalDistanceRecord, ...]] = field(
        default=None, repr=False
    )

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_identity_records(self) -> Sequence[IdentityRecord]:
        """Read every row of the identity dataset.

        Raises:
            DatasetError: If the file cannot be read or a row is malformed.
        """
        if self._identities is None:
            self._identities = tuple(
                self._read(self.config.state_name_path, self._parse_identities)
            )
        return self._identities

    def load_border_records(self) -> Sequence[BorderRecord]:
        """Read every line of the border dataset.

        Raises:
            DatasetError: If the file cannot be read or a line is malformed.
        """
        if self._borders is None:
            self._borders = tuple(
                self._read(self.config.borders_path, self._parse_borders)
            )
        return self._borders

    def load_distance_records(self) -> Sequence[CapitalDistanceRecord]:
        """Read every row of the capital-distance dataset.

        Raises:
            DatasetError: If the file cannot be read or a row is malformed.
        """
        if self._distances is None:
            self._distances = tuple(
                self._read(self.config.capdist_path, self._parse_distances)
            )
        return self._distances

    def _read(
        self, path: Path, parse: Callable[[TextIO, Dict[str, int]], Iterator[Any]]
    ) -> List[Any]:
        self._logger.debug("Loading dataset", extra={"path": str(path)})

        position: Dict[str, int] = {"line": 0}
        try:
            with path.open(encoding="utf-8", newline="") as f:
                records = list(parse(f, position))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(
                f"Failed to read dataset {path.name}",
                file_path=str(path),
                cause=e,
            )
        except (IndexError, ValueError) as e:
            raise DatasetError(
                f"Malformed row in {path.name} at line {position['line']}",
                file_path=str(path),
                line_number=position["line"],
                cause=e,
            )

        self._logger.info(
            "Dataset loaded",
            extra={"path": str(path), "records": len(records)},
        )
        return records

    @staticmethod
    def _rows(
        f: TextIO, delimiter: str, position: Dict[str, int]
    ) -> Iterator[List[str]]:
        reader = csv.reader(f, delimiter=delimiter)
        next(reader, None)
        for row in reader:
            position["line"] = reader.line_num
            if not any(cell.strip() for cell in row):
                continue
            yield row

    def _parse_identities(
        self, f: TextIO, position: Dict[str, int]
    ) -> Iterator[IdentityRecord]:
        for row in self._rows(f, "\t", position):
            yield IdentityRecord(
                state_id=row[1].strip(),
                name=row[2].strip(),
                end_date=row[4].strip(),
            )

    def _parse_borders(
        self, f: TextIO, position: Dict[str, int]
    ) -> Iterator[BorderRecord]:
        for number, line in enumerate(f, start=1):
            position["line"] = number
            record = parse_border_line(line)
            if record is not None:
                yield record

    def _parse_distances(
        self, f: TextIO, position: Dict[str, int]
    ) -> Iterator[CapitalDistanceRecord]:
        for row in self._rows(f, ",", position):
            km = int(row[4].strip())
            if km < 0:
                raise ValueError(f"Negative distance {km}")
            yield CapitalDistanceRecord(
                code_a=row[1].strip(),
                code_b=row[3].strip(),
                km=km,
            )

    def clear_cache(self) -> None:
        """Forget every dataset read so far."""
        self._identities = None
        self._borders = None
        self._distances = None
        self._logger.debug("Dataset cache cleared")
