"""Services layer - Application orchestration.

Available services:
- RoadTripService: Builds the border graph and answers route queries
"""

from .road_trip import RoadTripService

__all__ = ["RoadTripService"]
