"""Export adapters - Implementations of NetworkExporterPort.

Available implementations:
- TextFileExporter: Plain text snapshots (cities.txt, roads.txt)
"""

from .text_exporter import TextFileExporter

__all__ = ["TextFileExporter"]
