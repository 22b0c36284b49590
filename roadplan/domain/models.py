"""Immutable domain models for the road budget planner.

All models are frozen dataclasses with slots. They have no external
dependencies and are what the store hands out to callers; the store
itself keeps the mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class City:
    """A recorded city.

    Attributes:
        index: 0-based position in the city sequence
        name: City name as entered
    """

    index: int
    name: str

    @property
    def display_id(self) -> int:
        """Return the 1-based id shown to users and written to exports."""
        return self.index + 1


@dataclass(frozen=True, slots=True)
class RoadKey:
    """Unordered pair of city indices identifying a road.

    Always stored with ``low < high``; use :meth:`of` to build one from
    endpoints given in any order.
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low < 0:
            raise ValueError(f"City index must be non-negative, got {self.low}")
        if self.low >= self.high:
            raise ValueError(
                f"Road key requires low < high, got ({self.low}, {self.high})"
            )

    @classmethod
    def of(cls, first: int, second: int) -> RoadKey:
        return cls(min(first, second), max(first, second))


@dataclass(frozen=True, slots=True)
class Road:
    """A road between two cities with its planned budget.

    Attributes:
        first: City at the lower index
        second: City at the higher index
        budget: Planned spend, 0.0 until set
    """

    first: City
    second: City
    budget: float = 0.0

    @property
    def key(self) -> RoadKey:
        return RoadKey(self.first.index, self.second.index)

    @property
    def label(self) -> str:
        """Return the ``A-B`` label used in the road export."""
        return f"{self.first.name}-{self.second.name}"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a single service call.

    Non-interactive callers get one of these per call instead of being
    dropped into a retry loop.

    Attributes:
        success: Whether the operation took effect
        message: User-facing message describing the outcome
        value: Operation payload (City, Road, path...) on success
        error: The domain error that caused a failure, if any
        export: Outcome of the snapshot export the call triggered, if any
    """

    success: bool
    message: str
    value: Optional[Any] = None
    error: Optional[Exception] = None
    export: Optional[OperationResult] = None

    @classmethod
    def ok(cls, message: str, value: Optional[Any] = None) -> OperationResult:
        return cls(success=True, message=message, value=value)

    @classmethod
    def failed(cls, message: str, error: Optional[Exception] = None) -> OperationResult:
        return cls(success=False, message=message, error=error)

    def with_export(self, export: OperationResult) -> OperationResult:
        return replace(self, export=export)
