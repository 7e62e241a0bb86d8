"""Border graph construction.

``GraphBuilder`` turns border records into a directed graph keyed by
canonical id, with every edge starting at ``Distance.UNKNOWN``. Resolved
neighbors become vertices too, even before their own record is read.
``DistanceLoader`` then overwrites the weights of the edges for which
a capital-to-capital distance was measured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..domain.models import BorderRecord, CapitalDistanceRecord, Distance
from ..identity.aliases import generate_aliases, strip_article, strip_distance_marker
from ..identity.resolver import IdentityResolver
from ..identity.table import IdentityTable
from ..ports.graph import Graph


@dataclass
class GraphBuilder:
    """Builds the border graph while enriching the identity table.

    Attributes:
        table: Identity table, enriched with every alias discovered
        resolver: Resolver used for primary and neighbor names
        graph: Graph under construction
    """

    table: IdentityTable
    resolver: Optional[IdentityResolver] = None
    graph: Graph = field(default_factory=dict)

    dropped_neighbors: int = field(default=0, init=False)
    skipped_records: int = field(default=0, init=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.resolver is None:
            self.resolver = IdentityResolver(self.table)

    def build(self, records: Iterable[BorderRecord]) -> Graph:
        for record in records:
            self.add_border_record(record)

        self._logger.info(
            "Border graph built",
            extra={
                "vertices": len(self.graph),
                "edges": sum(len(edges) for edges in self.graph.values()),
                "skipped_records": self.skipped_records,
                "dropped_neighbors": self.dropped_neighbors,
            },
        )
        return self.graph

    def add_border_record(self, record: BorderRecord) -> Optional[str]:
        """Add one country and its borders.

        Returns:
            The canonical id of the primary country, or None if it could
            not be resolved (the whole record is then skipped).
        """
        primary_id = self._resolve(strip_article(record.name.strip()))
        if primary_id is None:
            self.skipped_records += 1
            self._logger.debug("Border record skipped", extra={"name": record.name})
            return None

        edges = self.graph.setdefault(primary_id, {})

        for neighbor_name, _marker in record.neighbors:
            name = strip_article(strip_distance_marker(neighbor_name))
            neighbor_id = self._resolve(name) if name else None
            if neighbor_id is None:
                self.dropped_neighbors += 1
                self._logger.debug(
                    "Neighbor dropped",
                    extra={"country": primary_id, "neighbor": neighbor_name},
                )
                continue
            edges.setdefault(neighbor_id, Distance.UNKNOWN)
            self.graph.setdefault(neighbor_id, {})

        return primary_id

    def _resolve(self, name: str) -> Optional[str]:
        assert self.resolver is not None

        aliases = generate_aliases(name)
        self.table.record_surface_forms(name, aliases)

        state_id = self.resolver.resolve(name, aliases)
        if state_id is not None:
            self.table.register(state_id, aliases)
        return state_id


@dataclass
class DistanceLoader:
    """Fills in measured distances on existing border edges.

    Attributes:
        graph: Border graph to update in place
        padding_letter: Appended to two-letter codes ("UK" -> "UKG")
    """

    graph: Graph
    padding_letter: str = "G"

    ignored_records: int = field(default=0, init=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def normalize_code(self, code: str) -> str:
        code = code.strip()
        if len(code) == 2:
            return code + self.padding_letter
        return code

    def apply(self, records: Iterable[CapitalDistanceRecord]) -> int:
        """Overwrite the weight of every edge with a measured distance.

        Returns:
            Number of edge weights written.
        """
        updated = 0
        for record in records:
            code_a = self.normalize_code(record.code_a)
            code_b = self.normalize_code(record.code_b)

            edges = self.graph.get(code_a)
            if edges is None or code_b not in edges:
                self.ignored_records += 1
                continue

            edges[code_b] = Distance.known(record.km)
            updated += 1

        self._logger.info(
            "Capital distances applied",
            extra={"updated": updated, "ignored": self.ignored_records},
        )
        return updated
