"""Road plan service - Main orchestrator.

Runs store operations, writes the matching snapshot export after each
mutation, and turns domain errors into OperationResult values that a
front end can print as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..domain.errors import (
    DuplicateCityError,
    ExportError,
    InvalidCountError,
    NoRoadError,
    ReferentialError,
    ValidationError,
)
from ..domain.models import OperationResult
from ..graph.network import RoadNetwork
from ..ports.export import NetworkExporterPort
from ..ports.rendering import ReportRendererPort

PAIR_ERROR = "Error: One or both cities not found, or same city."


@dataclass
class RoadPlanService:
    """Main service for recording cities, roads and road budgets.

    City exports follow add/rename, road exports follow add-road and
    set-budget (including their failure paths). The export outcome is
    attached to the returned result; a failed export never undoes the
    in-memory change.

    Attributes:
        network: The store being edited
        exporter: Writes snapshot files
        renderer: Produces console tables
    """

    network: RoadNetwork
    exporter: NetworkExporterPort
    renderer: ReportRendererPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ---- Cities ----------------------------------------------------------
    def add_city(self, name: str) -> OperationResult:
        """Add one city without exporting.

        Batch callers export once at the end via export_cities().
        """
        try:
            city = self.network.add_city(name)
        except DuplicateCityError as e:
            return OperationResult.failed(
                f"City '{name}' already exists. Skipping.", error=e
            )
        except ValidationError as e:
            return OperationResult.failed("City name must not be empty.", error=e)
        return OperationResult.ok(
            f"City '{city.name}' added with index {city.display_id}.", value=city
        )

    def add_cities(self, names: Sequence[str]) -> OperationResult:
        """Add a batch of cities and export the city file once.

        Each name gets exactly one attempt. The per-name results are the
        value of the returned result, which succeeds when every name was
        accepted.

        Raises:
            InvalidCountError: If ``names`` is empty.
        """
        if not names:
            raise InvalidCountError(
                "Number of cities to add must be positive", count=0
            )
        results = tuple(self.add_city(name) for name in names)
        added = sum(1 for r in results if r.success)
        self._logger.info(
            "City batch processed", extra={"requested": len(names), "added": added}
        )
        summary = OperationResult(
            success=added == len(names),
            message=f"{added} of {len(names)} cities added.",
            value=results,
        )
        return summary.with_export(self.export_cities())

    def rename_city(self, index_1_based: int, new_name: str) -> OperationResult:
        """Rename a city in place, then rewrite the city export."""
        try:
            city = self.network.rename_city(index_1_based, new_name)
        except DuplicateCityError as e:
            return OperationResult.failed(
                f"City '{new_name}' already exists.", error=e
            )
        except ValidationError as e:
            return OperationResult.failed(f"Error: {e.message}.", error=e)
        result = OperationResult.ok("City updated successfully.", value=city)
        return result.with_export(self.export_cities())

    def find_city(self, index_1_based: int) -> OperationResult:
        try:
            city = self.network.find_city(index_1_based)
        except ValidationError as e:
            return OperationResult.failed(f"Error: {e.message}.", error=e)
        return OperationResult.ok(
            f"City at index {index_1_based}: {city.name}", value=city
        )

    # ---- Roads -----------------------------------------------------------
    def add_road(self, first: str, second: str) -> OperationResult:
        """Connect two cities, then rewrite the road export."""
        try:
            key = self.network.add_road(first, second)
        except ReferentialError as e:
            self._logger.info("Road rejected", extra={"reason": str(e)})
            result = OperationResult.failed(PAIR_ERROR, error=e)
        else:
            result = OperationResult.ok(
                f"Road added between {first} and {second}.", value=key
            )
        return result.with_export(self.export_roads())

    def find_road(self, first: str, second: str) -> OperationResult:
        """Check that a road exists, with the same messages as set_budget."""
        try:
            road = self.network.road_between(first, second)
        except NoRoadError as e:
            return OperationResult.failed(
                f"Error: No road exists between {first} and {second}.", error=e
            )
        except ReferentialError as e:
            return OperationResult.failed(PAIR_ERROR, error=e)
        return OperationResult.ok(f"Road {road.label} found.", value=road)

    def set_budget(self, first: str, second: str, amount: float) -> OperationResult:
        """Set a road budget, then rewrite the road export.

        The road export is written whatever the outcome.
        """
        result = self.find_road(first, second)
        if result.success:
            try:
                road = self.network.set_budget(first, second, amount)
            except ValidationError as e:
                result = OperationResult.failed(
                    "Invalid input. Please enter a non-negative number.", error=e
                )
            else:
                result = OperationResult.ok(
                    f"Budget added for the road between {first} and {second}.",
                    value=road,
                )
        return result.with_export(self.export_roads())

    # ---- Exports ---------------------------------------------------------
    def export_cities(self) -> OperationResult:
        try:
            path = self.exporter.export_cities(self.network)
        except ExportError as e:
            return self._export_failed(e)
        return OperationResult.ok(f"Cities saved to {path.name}.", value=path)

    def export_roads(self) -> OperationResult:
        try:
            path = self.exporter.export_roads(self.network)
        except ExportError as e:
            return self._export_failed(e)
        return OperationResult.ok(
            f"Roads and budgets saved to {path.name}.", value=path
        )

    def _export_failed(self, error: ExportError) -> OperationResult:
        self._logger.error(
            "Export failed",
            extra={"path": error.file_path, "error": str(error.cause)},
        )
        return OperationResult.failed(f"Error: {error.message}.", error=error)

    # ---- Read-outs -------------------------------------------------------
    def list_cities(self) -> List[str]:
        return self.renderer.render_cities(self.network)

    def render_road_matrix(self) -> List[str]:
        return self.renderer.render_road_matrix(self.network)

    def render_full_report(self) -> List[str]:
        return self.renderer.render_full_report(self.network)
