import uuid
from pydantic import Field

from .base import ApiModel, NonBlankStr, RequestModel
from .regions import Region
from .difficulties import Difficulty

WALK_NAME_MIN_LENGTH = 3
WALK_NAME_MAX_LENGTH = 50


class WalkBase(RequestModel):
    name: NonBlankStr = Field(min_length=WALK_NAME_MIN_LENGTH, max_length=WALK_NAME_MAX_LENGTH)
    description: str
    length_in_km: float = Field(gt=0, allow_inf_nan=False)
    walk_image_url: str | None = Field(default=None, max_length=2048)
    region_id: uuid.UUID = Field(strict=False)
    difficulty_id: uuid.UUID = Field(strict=False)


class AddWalkRequest(WalkBase):
    pass


class UpdateWalkRequest(WalkBase):
    pass


class Walk(ApiModel):
    id: uuid.UUID
    name: str
    description: str
    length_in_km: float
    walk_image_url: str | None = None
    region_id: uuid.UUID
    difficulty_id: uuid.UUID
    region: Region
    difficulty: Difficulty
