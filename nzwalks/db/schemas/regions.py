import uuid
from pydantic import Field

from .base import ApiModel, NonBlankStr, RequestModel


class RegionBase(RequestModel):
    code: NonBlankStr = Field(min_length=1, max_length=100)
    name: NonBlankStr = Field(min_length=1, max_length=255)
    region_image_url: str | None = Field(default=None, max_length=2048)


class AddRegionRequest(RegionBase):
    pass


class UpdateRegionRequest(RegionBase):
    pass


class Region(ApiModel):
    id: uuid.UUID
    code: str
    name: str
    region_image_url: str | None = None
