"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityNotFoundError,
    DuplicateCityError,
    ExportError,
    InvalidBudgetError,
    InvalidCityNameError,
    InvalidCountError,
    InvalidIndexError,
    NoRoadError,
    ReferentialError,
    RoadPlanError,
    SameCityError,
    ValidationError,
)
from .models import City, OperationResult, Road, RoadKey

__all__ = [
    # Models
    "City",
    "Road",
    "RoadKey",
    "OperationResult",
    # Errors
    "RoadPlanError",
    "ValidationError",
    "InvalidCountError",
    "InvalidIndexError",
    "InvalidBudgetError",
    "InvalidCityNameError",
    "DuplicateCityError",
    "ReferentialError",
    "CityNotFoundError",
    "SameCityError",
    "NoRoadError",
    "ExportError",
]
