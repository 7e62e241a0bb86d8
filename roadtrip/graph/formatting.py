"""Human-readable route output."""

from typing import Callable, List, Optional, Sequence

from ..domain.models import Distance
from ..ports.graph import Graph

DisplayName = Callable[[str], str]


def format_hop(origin: str, destination: str, distance: Optional[Distance]) -> str:
    """Format one hop as "A --> B (D km.)"."""
    shown = distance if distance is not None else Distance.UNKNOWN
    return f"{origin} --> {destination} ({shown} km.)"


def format_hops(
    path: Sequence[str], graph: Graph, display_name: DisplayName
) -> List[str]:
    """Format consecutive ids of a path as hop lines.

    Each hop's distance is the weight of the direct edge between the two
    ids, not the accumulated shortest-path distance. A missing or
    unmeasured edge shows the unknown sentinel.
    """
    return [
        format_hop(
            display_name(origin),
            display_name(destination),
            graph.get(origin, {}).get(destination),
        )
        for origin, destination in zip(path, path[1:])
    ]
