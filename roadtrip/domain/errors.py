"""Typed domain errors for the road trip planner.

All errors inherit from RoadTripError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadTripError(Exception):
    """Base error for the road trip domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DatasetError(RoadTripError):
    """A dataset file is missing, unreadable or malformed.

    Raised at load time; the run must abort before any query is served.

    Attributes:
        file_path: Path to the offending file
        line_number: 1-based line of the malformed row, if known
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class CountryNotFoundError(RoadTripError):
    """A country name does not resolve to any registered identity.

    Attributes:
        country_name: The name as entered
    """

    country_name: str = ""


@dataclass
class NoRouteFoundError(RoadTripError):
    """Both countries are known but no border chain connects them."""

    origin: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(RoadTripError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
