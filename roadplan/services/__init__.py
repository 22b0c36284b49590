"""Services layer - Application orchestration.

Available services:
- RoadPlanService: Records cities, roads and budgets with write-through exports
"""

from .planning import RoadPlanService

__all__ = ["RoadPlanService"]
