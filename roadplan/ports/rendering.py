"""Rendering port - Abstraction for console read-outs of the network.

Renderers return lines of text rather than printing, so the same
output can go to a terminal, a log, or a test assertion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..graph.network import RoadNetwork


class ReportRendererPort(Protocol):
    """Port for tabular views of cities, roads and budgets.

    Implementation: adapters/rendering/console_table.py
    """

    def render_cities(self, network: RoadNetwork) -> List[str]:
        """Render the numbered list of cities."""
        ...

    def render_road_matrix(self, network: RoadNetwork) -> List[str]:
        """Render the 0/1 road adjacency matrix."""
        ...

    def render_budget_matrix(self, network: RoadNetwork) -> List[str]:
        """Render the road budget matrix."""
        ...

    def render_full_report(self, network: RoadNetwork) -> List[str]:
        """Render cities, then roads, then budgets."""
        ...
