"""Fixed-width console tables for cities, roads and budgets.

Column layout: a 15-character row header with the city name, then one
cell per city. Road cells are 3 wide under a 3-letter abbreviation,
budget cells are 7 wide under a 5-letter abbreviation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from ...graph.network import RoadNetwork

ROW_HEADER_WIDTH = 15


@dataclass
class ConsoleTableRenderer:
    """Plain text renderer for terminal output.

    This adapter implements ReportRendererPort.

    Attributes:
        road_cell_width: Width of a road matrix cell
        budget_cell_width: Width of a budget matrix cell
        budget_precision: Decimals shown for budgets
    """

    road_cell_width: int = 3
    budget_cell_width: int = 7
    budget_precision: int = 1
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_cities(self, network: RoadNetwork) -> List[str]:
        lines = ["", "Cities:", "---------------------"]
        if not len(network):
            lines.append("No cities recorded yet.")
            return lines
        lines.extend(f"{city.display_id}. {city.name}" for city in network.cities())
        return lines

    def render_road_matrix(self, network: RoadNetwork) -> List[str]:
        if not len(network):
            return ["No cities to display roads for. Add cities first."]
        width = self.road_cell_width
        return [
            "",
            "Roads Adjacency Matrix",
            "----------------------",
            *self._table(network, network.road_matrix(), abbrev=3, width=width,
                         fmt=lambda v: f"{v:<{width}}"),
        ]

    def render_budget_matrix(self, network: RoadNetwork) -> List[str]:
        if not len(network):
            return ["No cities to display budgets for."]
        width = self.budget_cell_width
        precision = self.budget_precision
        return [
            "",
            "Budgets Adjacency Matrix",
            "------------------------",
            *self._table(network, network.budget_matrix(), abbrev=5, width=width,
                         fmt=lambda v: f"{v:<{width}.{precision}f}"),
        ]

    def render_full_report(self, network: RoadNetwork) -> List[str]:
        self._logger.debug("Rendering full report", extra={"cities": len(network)})
        return [
            *self.render_cities(network),
            *self.render_road_matrix(network),
            *self.render_budget_matrix(network),
        ]

    @staticmethod
    def _table(
        network: RoadNetwork,
        matrix: Sequence[Sequence[float]],
        *,
        abbrev: int,
        width: int,
        fmt: Callable[[float], str],
    ) -> List[str]:
        cities = network.cities()
        header = " " * ROW_HEADER_WIDTH + "".join(
            f"{city.name[:abbrev]:<{width}}" for city in cities
        )
        rows = [
            f"{city.name:<{ROW_HEADER_WIDTH}}" + "".join(fmt(v) for v in row)
            for city, row in zip(cities, matrix)
        ]
        return [header, *rows]
