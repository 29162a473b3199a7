import uuid

from .base import ApiModel


class Difficulty(ApiModel):
    id: uuid.UUID
    name: str
