"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .export import NetworkExporterPort
from .rendering import ReportRendererPort

__all__ = [
    "NetworkExporterPort",
    "ReportRendererPort",
]
