"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    CountryNotFoundError,
    DatasetError,
    NoRouteFoundError,
    RoadTripError,
)
from .models import (
    BorderRecord,
    CanonicalCountry,
    CapitalDistanceRecord,
    Distance,
    IdentityRecord,
    RouteResult,
)

__all__ = [
    # Models
    "BorderRecord",
    "CanonicalCountry",
    "CapitalDistanceRecord",
    "Distance",
    "IdentityRecord",
    "RouteResult",
    # Errors
    "RoadTripError",
    "DatasetError",
    "CountryNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
