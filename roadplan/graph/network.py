"""In-memory road network store.

Cities form an append-only sequence with a parallel name -> index
lookup. Roads are kept as an adjacency mapping from an unordered index
pair to the road budget: a key being present means the road exists.
Dense 0/1 and budget matrices are derived views for rendering.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from ..domain.errors import (
    CityNotFoundError,
    DuplicateCityError,
    InvalidBudgetError,
    InvalidCityNameError,
    InvalidIndexError,
    NoRoadError,
    SameCityError,
)
from ..domain.models import City, Road, RoadKey


class RoadNetwork:
    """Cities, roads and road budgets owned by a single caller.

    Every mutation either fully applies or raises a RoadPlanError
    subclass and leaves the network untouched.
    """

    def __init__(self) -> None:
        self._names: List[str] = []
        self._index: Dict[str, int] = {}
        self._roads: Dict[RoadKey, float] = {}
        self._logger = logging.getLogger(__name__)

    # ---- Cities ----------------------------------------------------------
    @property
    def city_count(self) -> int:
        return len(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def index_of(self, name: str) -> Optional[int]:
        """Return the 0-based index of ``name``, or None if unknown."""
        return self._index.get(name)

    def cities(self) -> Tuple[City, ...]:
        return tuple(City(i, name) for i, name in enumerate(self._names))

    def add_city(self, name: str) -> City:
        """Append a new city.

        Raises:
            InvalidCityNameError: If the name is blank.
            DuplicateCityError: If the name is already recorded.
        """
        self._check_name(name)
        existing = self._index.get(name)
        if existing is not None:
            raise DuplicateCityError(
                f"City '{name}' already exists",
                city_name=name,
                existing_index=existing,
            )

        self._names.append(name)
        self._index[name] = len(self._names) - 1
        city = City(len(self._names) - 1, name)
        self._logger.info(
            "City added", extra={"city": name, "display_id": city.display_id}
        )
        return city

    def find_city(self, index_1_based: int) -> City:
        """Return the city shown to users as ``index_1_based``.

        Raises:
            InvalidIndexError: If the index is outside ``[1, city_count]``.
        """
        self._check_index(index_1_based)
        i = index_1_based - 1
        return City(i, self._names[i])

    def rename_city(self, index_1_based: int, new_name: str) -> City:
        """Give the city at ``index_1_based`` a new name, keeping its index.

        Raises:
            InvalidIndexError: If the index is outside ``[1, city_count]``.
            InvalidCityNameError: If the new name is blank.
            DuplicateCityError: If another city already uses ``new_name``.
        """
        self._check_index(index_1_based)
        self._check_name(new_name)
        i = index_1_based - 1
        old_name = self._names[i]
        holder = self._index.get(new_name)
        if holder is not None and holder != i:
            raise DuplicateCityError(
                f"City '{new_name}' already exists",
                city_name=new_name,
                existing_index=holder,
            )

        del self._index[old_name]
        self._names[i] = new_name
        self._index[new_name] = i
        self._logger.info(
            "City renamed",
            extra={"display_id": index_1_based, "old": old_name, "new": new_name},
        )
        return City(i, new_name)

    # ---- Roads -----------------------------------------------------------
    def add_road(self, first: str, second: str) -> RoadKey:
        """Record a road between two cities. Re-adding a road is a no-op.

        Raises:
            CityNotFoundError: If either name is unknown.
            SameCityError: If both names are the same city.
        """
        key = self._resolve_pair(first, second)
        self._roads.setdefault(key, 0.0)
        self._logger.info("Road added", extra={"first": first, "second": second})
        return key

    def has_road(self, first: str, second: str) -> bool:
        i, j = self._index.get(first), self._index.get(second)
        if i is None or j is None or i == j:
            return False
        return RoadKey.of(i, j) in self._roads

    def road_between(self, first: str, second: str) -> Road:
        """Return the road between two cities.

        Raises:
            CityNotFoundError: If either name is unknown.
            SameCityError: If both names are the same city.
            NoRoadError: If the cities are not connected.
        """
        key = self._resolve_pair(first, second)
        if key not in self._roads:
            raise NoRoadError(
                f"No road exists between {first} and {second}",
                first=first,
                second=second,
            )
        return self._road(key)

    def budget_between(self, first: str, second: str) -> float:
        return self.road_between(first, second).budget

    def set_budget(self, first: str, second: str, amount: float) -> Road:
        """Set the budget of an existing road, replacing any prior value.

        Raises:
            CityNotFoundError: If either name is unknown.
            SameCityError: If both names are the same city.
            NoRoadError: If the cities are not connected.
            InvalidBudgetError: If ``amount`` is negative or not finite.
        """
        key = self.road_between(first, second).key
        amount = self._check_budget(amount)
        self._roads[key] = amount
        self._logger.info(
            "Budget set",
            extra={"first": first, "second": second, "budget": amount},
        )
        return self._road(key)

    def roads(self) -> Tuple[Road, ...]:
        """Return all roads in row-major order of their lower/higher index."""
        return tuple(self._road(key) for key in sorted(self._roads, key=_row_major))

    # ---- Matrix views ----------------------------------------------------
    def road_matrix(self) -> List[List[int]]:
        n = len(self._names)
        matrix = [[0] * n for _ in range(n)]
        for key in self._roads:
            matrix[key.low][key.high] = matrix[key.high][key.low] = 1
        return matrix

    def budget_matrix(self) -> List[List[float]]:
        n = len(self._names)
        matrix = [[0.0] * n for _ in range(n)]
        for key, budget in self._roads.items():
            matrix[key.low][key.high] = matrix[key.high][key.low] = budget
        return matrix

    # ---- Internals -------------------------------------------------------
    def _road(self, key: RoadKey) -> Road:
        return Road(
            City(key.low, self._names[key.low]),
            City(key.high, self._names[key.high]),
            self._roads[key],
        )

    def _resolve_pair(self, first: str, second: str) -> RoadKey:
        i = self._index.get(first)
        j = self._index.get(second)
        for name, idx in ((first, i), (second, j)):
            if idx is None:
                raise CityNotFoundError(f"City not found: {name}", city_name=name)
        if i == j:
            raise SameCityError(
                f"A road needs two different cities, got {first} twice",
                city_name=first,
            )
        return RoadKey.of(i, j)  # type: ignore[arg-type]

    def _check_index(self, index_1_based: int) -> None:
        if not 1 <= index_1_based <= len(self._names):
            raise InvalidIndexError(
                f"Index {index_1_based} is outside 1..{len(self._names)}",
                index=index_1_based,
                city_count=len(self._names),
            )

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidCityNameError("City name must not be empty", name=name)

    @staticmethod
    def _check_budget(amount: float) -> float:
        try:
            value = float(amount)
        except (TypeError, ValueError) as e:
            raise InvalidBudgetError(
                f"Budget must be a number, got {amount!r}", cause=e
            )
        if not math.isfinite(value) or value < 0:
            raise InvalidBudgetError(
                f"Budget must be a non-negative number, got {amount}",
                amount=value,
            )
        return value


def _row_major(key: RoadKey) -> Tuple[int, int]:
    return key.low, key.high
