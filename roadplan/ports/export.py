"""Export port - Abstraction for persisting network snapshots.

Exports are full-state dumps written after each mutation. They are
never read back, so the port only covers the write side.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.network import RoadNetwork


class NetworkExporterPort(Protocol):
    """Port for snapshot exports.

    Implementation: adapters/export/text_exporter.py

    Each call overwrites its target with the current state of the
    network. The two exports are independent of each other.
    """

    def export_cities(self, network: RoadNetwork) -> Path:
        """Write every city with its display id.

        Args:
            network: The network to snapshot.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If the file cannot be written.
        """
        ...

    def export_roads(self, network: RoadNetwork) -> Path:
        """Write every road with its budget.

        Args:
            network: The network to snapshot.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If the file cannot be written.
        """
        ...
