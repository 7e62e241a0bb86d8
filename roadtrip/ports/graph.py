"""Graph ports - Abstractions for dataset loading and routing.

These protocols define the contracts between the core (identity
resolution, graph construction, shortest path) and the collaborators
that read the raw datasets or compute routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Protocol

if TYPE_CHECKING:
    from ..domain.models import (
        BorderRecord,
        CapitalDistanceRecord,
        Distance,
        IdentityRecord,
        RouteResult,
    )

# Maps source id -> destination id -> edge weight
Graph = Dict[str, Dict[str, "Distance"]]


class DatasetRepositoryPort(Protocol):
    """Port for reading the three source datasets.

    Implementation: adapters/datasets/file_repository.py

    Each method returns already-tokenized records; any unreadable or
    malformed input must surface as a DatasetError.
    """

    def load_identity_records(self) -> Iterable[IdentityRecord]:
        """Read the country-identity dataset."""
        ...

    def load_border_records(self) -> Iterable[BorderRecord]:
        """Read the border-adjacency dataset."""
        ...

    def load_distance_records(self) -> Iterable[CapitalDistanceRecord]:
        """Read the capital-distance dataset."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation over canonical ids."""

    def solve(self, graph: Graph, origin: str, destination: str) -> RouteResult:
        """Find the shortest path between two canonical ids.

        Args:
            graph: The border graph.
            origin: Origin country id.
            destination: Destination country id.

        Returns:
            RouteResult with the id path and total distance.
        """
        ...

    def solve_safe(self, graph: Graph, origin: str, destination: str) -> RouteResult:
        """Like solve(), but returns an empty result instead of raising."""
        ...
