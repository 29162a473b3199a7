"""
Pydantic request/response schemas (DTOs) split by resource.
"""

from .base import ApiModel, RequestModel, NonBlankStr
from .regions import RegionBase, AddRegionRequest, UpdateRegionRequest, Region
from .difficulties import Difficulty
from .walks import (
    WALK_NAME_MIN_LENGTH,
    WALK_NAME_MAX_LENGTH,
    WalkBase,
    AddWalkRequest,
    UpdateWalkRequest,
    Walk,
)

__all__ = [
    "ApiModel",
    "RequestModel",
    "NonBlankStr",
    # Regions
    "RegionBase",
    "AddRegionRequest",
    "UpdateRegionRequest",
    "Region",
    # Difficulties
    "Difficulty",
    # Walks
    "WALK_NAME_MIN_LENGTH",
    "WALK_NAME_MAX_LENGTH",
    "WalkBase",
    "AddWalkRequest",
    "UpdateWalkRequest",
    "Walk",
]
