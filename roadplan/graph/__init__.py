"""Graph-related code for representing the road network.

This subpackage holds the in-memory store of cities, roads and road
budgets that every other layer works against.
"""

from .network import RoadNetwork

__all__ = ["RoadNetwork"]
