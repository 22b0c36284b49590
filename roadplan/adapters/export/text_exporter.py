"""Plain text snapshot exporter.

Writes two independent files, each truncated and rewritten in full:

    Index Cityname          Nbr Road Budget
    1 Kigali                1. Kigali-Huye 5.00
    2 Huye
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ...config import StorageConfig, get_config
from ...domain.errors import ExportError
from ...graph.network import RoadNetwork

CITIES_HEADER = "Index Cityname"
ROADS_HEADER = "Nbr Road Budget"


@dataclass
class TextFileExporter:
    """Exporter that writes space-separated text snapshots.

    This adapter implements NetworkExporterPort.

    Attributes:
        config: Storage configuration (directory, file names)
    """

    config: StorageConfig = field(default_factory=lambda: get_config().storage)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def export_cities(self, network: RoadNetwork) -> Path:
        """Overwrite the city file with the current city list.

        Raises:
            ExportError: If the file cannot be written.
        """
        lines = [f"{city.display_id} {city.name}" for city in network.cities()]
        return self._write(self.config.cities_path, CITIES_HEADER, lines)

    def export_roads(self, network: RoadNetwork) -> Path:
        """Overwrite the road file with every road and its budget.

        Roads are numbered from 1 in row-major order of city index.

        Raises:
            ExportError: If the file cannot be written.
        """
        lines = [
            f"{nbr}. {road.label} {road.budget:.2f}"
            for nbr, road in enumerate(network.roads(), start=1)
        ]
        return self._write(self.config.roads_path, ROADS_HEADER, lines)

    def _write(self, path: Path, header: str, lines: Iterable[str]) -> Path:
        self._logger.debug("Writing export", extra={"path": str(path)})
        try:
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(header + "\n")
                count = 0
                for line in lines:
                    f.write(line + "\n")
                    count += 1
        except OSError as e:
            raise ExportError(
                f"Could not open {path.name} for writing",
                file_path=str(path),
                cause=e,
            )
        self._logger.info("Export written", extra={"path": str(path), "records": count})
        return path
