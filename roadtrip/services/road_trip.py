"""Road trip service - Main orchestrator.

This service owns the identity table and the border graph built once
at startup, and answers route queries against them:
1. Identity table bootstrap from the identity dataset
2. Graph construction from the border dataset
3. Capital distances applied to the border edges
4. Route queries, each computed from scratch
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from rapidfuzz import fuzz, process

from ..adapters.graph import DijkstraRouteSolver
from ..domain.errors import CountryNotFoundError
from ..domain.models import BorderRecord, CapitalDistanceRecord, Distance, RouteResult
from ..graph.builder import DistanceLoader, GraphBuilder
from ..graph.formatting import format_hops
from ..identity.aliases import strip_article
from ..identity.resolver import IdentityResolver
from ..identity.table import IdentityTable
from ..ports.graph import DatasetRepositoryPort, Graph, RouteSolverPort


@dataclass
class RoadTripService:
    """Main service for border-to-border route queries.

    Attributes:
        identities: Canonical identity table, bootstrapped beforehand
        route_solver: Computes shortest paths over canonical ids
        padding_letter: Appended to two-letter capital-distance codes
        suggestion_cutoff: Minimum similarity (0-100) for suggest_country()
        graph: Border graph, filled by resolve_and_build_graph()
    """

    identities: IdentityTable
    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)
    padding_letter: str = "G"
    suggestion_cutoff: float = 80.0
    graph: Graph = field(default_factory=dict)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_repository(
        cls,
        repository: DatasetRepositoryPort,
        current_end_date: str = "2020-12-31",
        padding_letter: str = "G",
        route_solver: Optional[RouteSolverPort] = None,
        suggestion_cutoff: float = 80.0,
    ) -> RoadTripService:
        """Load all three datasets and build the graph.

        Raises:
            DatasetError: If any dataset cannot be read.
        """
        identities = IdentityTable.from_records(
            repository.load_identity_records(), current_end_date
        )
        service = cls(
            identities=identities,
            route_solver=route_solver or DijkstraRouteSolver(),
            padding_letter=padding_letter,
            suggestion_cutoff=suggestion_cutoff,
        )
        service.resolve_and_build_graph(
            repository.load_border_records(),
            repository.load_distance_records(),
        )
        return service

    def resolve_and_build_graph(
        self,
        border_records: Iterable[BorderRecord],
        distance_records: Iterable[CapitalDistanceRecord],
    ) -> Graph:
        """Build the border graph and apply the measured distances.

        Every alias discovered along the way is unioned into the
        identity table.
        """
        builder = GraphBuilder(
            table=self.identities,
            resolver=IdentityResolver(self.identities),
            graph=self.graph,
        )
        builder.build(border_records)
        DistanceLoader(self.graph, padding_letter=self.padding_letter).apply(
            distance_records
        )
        return self.graph

    def lookup(self, name: str) -> Optional[str]:
        """Canonical id of a user-entered name, or None."""
        return self.identities.lookup(strip_article(name.strip()))

    def resolve_country(self, name: str) -> str:
        """Canonical id of a user-entered name.

        Raises:
            CountryNotFoundError: If the name matches no known alias.
        """
        state_id = self.lookup(name)
        if state_id is None:
            raise CountryNotFoundError(
                f"Unknown country: {name}",
                country_name=name,
            )
        return state_id

    def is_valid_country(self, name: str) -> bool:
        """Check a user-entered name against every known spelling."""
        return self.identities.is_known_name(name.strip())

    def suggest_country(self, name: str) -> Optional[str]:
        """Closest registered alias to a rejected name, or None.

        Matching is case-insensitive and only informs the user; it never
        resolves a name by itself.
        """
        name = name.strip()
        if not name:
            return None

        aliases = [alias for _, known in self.identities.items() for alias in known]
        result = process.extractOne(
            name.lower(),
            [alias.lower() for alias in aliases],
            scorer=fuzz.ratio,
            score_cutoff=self.suggestion_cutoff,
        )
        if result is None:
            return None

        # extractOne returns (match, score, index) for list choices
        return aliases[result[2]]

    def edge_weight(self, name1: str, name2: str) -> Optional[Distance]:
        """Weight of the direct border edge between two names, if any."""
        id1 = self.lookup(name1)
        id2 = self.lookup(name2)
        if id1 is None or id2 is None:
            return None
        return self.graph.get(id1, {}).get(id2)

    def direct_distance(self, name1: str, name2: str) -> Optional[int]:
        """Measured distance of the direct border edge between two names.

        Returns:
            The distance in kilometers, or None if either name is unknown,
            the countries share no border, or the border has no measured
            distance.
        """
        weight = self.edge_weight(name1, name2)
        if weight is None:
            return None
        return weight.km

    def shortest_path(self, name1: str, name2: str) -> RouteResult:
        """Cheapest border-to-border route between two names.

        Returns:
            RouteResult whose hops read "A --> B (D km.)". The result is
            empty when either name is unknown or no border chain exists.
        """
        id1 = self.lookup(name1)
        id2 = self.lookup(name2)
        if id1 is None or id2 is None:
            self._logger.info(
                "Route query with unknown country",
                extra={"origin": name1, "destination": name2},
            )
            return RouteResult(origin=name1, destination=name2)

        route = self.route_solver.solve_safe(self.graph, id1, id2)
        names = tuple(self.identities.display_name(state_id) for state_id in route.path)
        hops = (
            tuple(format_hops(route.path, self.graph, self.identities.display_name))
            if not route.is_empty
            else ()
        )

        return dataclasses.replace(
            route, origin=name1, destination=name2, names=names, hops=hops
        )

    def format_result(self, route: RouteResult) -> str:
        """Format a route the way the interactive prompt prints it."""
        if route.is_empty:
            return f"No path found between {route.origin} and {route.destination}"
        lines = [f"Route from {route.origin} to {route.destination}:"]
        lines.extend(f"* {hop}" for hop in route.hops)
        return "\n".join(lines)
