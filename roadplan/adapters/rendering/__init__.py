"""Rendering adapters - Implementations of ReportRendererPort.

Available implementations:
- ConsoleTableRenderer: Fixed-width tables for terminal output
"""

from .console_table import ConsoleTableRenderer

__all__ = ["ConsoleTableRenderer"]
