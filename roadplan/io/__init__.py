"""Input/output front ends for the road budget planner.

This subpackage holds the interactive console; it only talks to the
service layer, so other front ends can sit beside it.
"""

from .console import ConsoleApp

__all__ = ["ConsoleApp"]
