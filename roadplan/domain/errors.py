"""Typed domain errors for the road budget planner.

Store operations raise these instead of looping on bad input, so any
caller (console, tests, another front end) decides how to recover.

All errors inherit from RoadPlanError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadPlanError(Exception):
    """Base error for the road planning domain.

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
class ValidationError(RoadPlanError):
    """Input value is malformed or out of range."""


@dataclass
class InvalidCountError(ValidationError):
    """Number of cities to add is not a positive integer.

    Attributes:
        count: The rejected count
    """

    count: int = 0


@dataclass
class InvalidIndexError(ValidationError):
    """City index outside ``[1, city_count]``.

    Attributes:
        index: The rejected 1-based index
        city_count: Number of cities at the time of the call
    """

    index: int = 0
    city_count: int = 0


@dataclass
class InvalidBudgetError(ValidationError):
    """Budget is negative or not a finite number.

    Attributes:
        amount: The rejected amount
    """

    amount: float = 0.0


@dataclass
class InvalidCityNameError(ValidationError):
    """City name is empty or whitespace only."""

    name: str = ""


@dataclass
class DuplicateCityError(ValidationError):
    """City name is already used by another city.

    Attributes:
        city_name: The conflicting name
        existing_index: 0-based index of the city holding the name
    """

    city_name: str = ""
    existing_index: Optional[int] = None


@dataclass
class ReferentialError(RoadPlanError):
    """Operation refers to cities or roads that do not exist."""


@dataclass
class CityNotFoundError(ReferentialError):
    """City name not known to the network.

    Attributes:
        city_name: The name that was not found
    """

    city_name: str = ""


@dataclass
class SameCityError(ReferentialError):
    """Both road endpoints resolve to the same city."""

    city_name: str = ""


@dataclass
class NoRoadError(ReferentialError):
    """No road exists between the two cities.

    Attributes:
        first: First city name
        second: Second city name
    """

    first: str = ""
    second: str = ""


@dataclass
class ExportError(RoadPlanError):
    """Snapshot file could not be written.

    Attributes:
        file_path: Path of the export file
    """

    file_path: Optional[str] = None

