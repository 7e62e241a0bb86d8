"""Immutable domain models for the road trip planner.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the records read from the three datasets,
the tagged edge weight, and the result of a route query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


@dataclass(frozen=True, slots=True)
class Distance:
    """Edge weight in kilometers, or the "unknown distance" sentinel.

    ``Distance.UNKNOWN`` marks a border that is known to exist but has no
    measured capital-to-capital distance. It absorbs addition and orders
    after every known distance, so relaxing an edge through it can never
    strictly improve anything.

    Attributes:
        km: Measured distance, or None for the sentinel
    """

    km: Optional[int] = None

    UNKNOWN: ClassVar[Distance]
    ZERO: ClassVar[Distance]

    @classmethod
    def known(cls, km: int) -> Distance:
        """Build a measured distance."""
        if km < 0:
            raise ValueError(f"Distance must be non-negative, got {km}")
        return cls(km=int(km))

    @property
    def is_known(self) -> bool:
        return self.km is not None

    def __add__(self, other: Union[Distance, int]) -> Distance:
        other_km = other.km if isinstance(other, Distance) else other
        if self.km is None or other_km is None:
            return Distance.UNKNOWN
        return Distance(km=self.km + other_km)

    def __lt__(self, other: Distance) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        if self.km is None:
            return False
        if other.km is None:
            return True
        return self.km < other.km

    def __str__(self) -> str:
        return "unknown" if self.km is None else str(self.km)


Distance.UNKNOWN = Distance()
Distance.ZERO = Distance(km=0)


@dataclass(frozen=True, slots=True)
class CanonicalCountry:
    """Snapshot of one canonical identity.

    Attributes:
        id: Stable short code joining the three datasets (e.g. 'ALB')
        aliases: Known surface forms, in registration order
    """

    id: str
    aliases: tuple[str, ...]

    @property
    def display_name(self) -> str:
        """First registered alias, used for all user-facing output."""
        return self.aliases[0]


@dataclass(frozen=True, slots=True)
class IdentityRecord:
    """One row of the country-identity dataset."""

    state_id: str
    name: str
    end_date: str


@dataclass(frozen=True, slots=True)
class BorderRecord:
    """One line of the border-adjacency dataset.

    Attributes:
        name: Primary country name as written
        neighbors: (neighbor name, border length marker) pairs
    """

    name: str
    neighbors: tuple[tuple[str, Optional[int]], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CapitalDistanceRecord:
    """One row of the capital-distance dataset."""

    code_a: str
    code_b: str
    km: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query between two countries.

    Attributes:
        origin: Origin name as requested
        destination: Destination name as requested
        path: Ordered tuple of canonical ids forming the route
        names: Display names for each id of ``path``
        hops: Formatted "A --> B (D km.)" lines
        total_distance: Accumulated shortest-path distance
    """

    origin: str
    destination: str
    path: tuple[str, ...] = field(default_factory=tuple)
    names: tuple[str, ...] = field(default_factory=tuple)
    hops: tuple[str, ...] = field(default_factory=tuple)
    total_distance: Distance = Distance.UNKNOWN

    @property
    def is_empty(self) -> bool:
        """Check if no route was found (a single country is no route)."""
        return len(self.path) < 2

    @property
    def num_hops(self) -> int:
        return max(len(self.path) - 1, 0)
