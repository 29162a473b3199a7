"""
Conversions between ORM entities and API schemas.

Every pair is written out field by field. Request bodies never carry the
identifier: the store assigns it on create and the route supplies it on
update.
"""
from typing import Iterable, List

from nzwalks.db import models, schemas


# Regions

def region_to_dto(region: models.Region) -> schemas.Region:
    return schemas.Region(
        id=region.id,
        code=region.code,
        name=region.name,
        region_image_url=region.region_image_url,
    )


def regions_to_dto(regions: Iterable[models.Region]) -> List[schemas.Region]:
    return [region_to_dto(r) for r in regions]


def add_region_request_to_region(request: schemas.AddRegionRequest) -> models.Region:
    return models.Region(
        code=request.code,
        name=request.name,
        region_image_url=request.region_image_url,
    )


def update_region_request_to_region(request: schemas.UpdateRegionRequest) -> models.Region:
    return models.Region(
        code=request.code,
        name=request.name,
        region_image_url=request.region_image_url,
    )


# Difficulties

def difficulty_to_dto(difficulty: models.Difficulty) -> schemas.Difficulty:
    return schemas.Difficulty(id=difficulty.id, name=difficulty.name)


def difficulties_to_dto(difficulties: Iterable[models.Difficulty]) -> List[schemas.Difficulty]:
    return [difficulty_to_dto(d) for d in difficulties]


# Walks

def walk_to_dto(walk: models.Walk) -> schemas.Walk:
    """Map a walk, embedding its region and difficulty from the loaded relationships."""
    return schemas.Walk(
        id=walk.id,
        name=walk.name,
        description=walk.description,
        length_in_km=walk.length_in_km,
        walk_image_url=walk.walk_image_url,
        region_id=walk.region_id,
        difficulty_id=walk.difficulty_id,
        region=region_to_dto(walk.region),
        difficulty=difficulty_to_dto(walk.difficulty),
    )


def walks_to_dto(walks: Iterable[models.Walk]) -> List[schemas.Walk]:
    return [walk_to_dto(w) for w in walks]


def add_walk_request_to_walk(request: schemas.AddWalkRequest) -> models.Walk:
    return models.Walk(
        name=request.name,
        description=request.description,
        length_in_km=request.length_in_km,
        walk_image_url=request.walk_image_url,
        region_id=request.region_id,
        difficulty_id=request.difficulty_id,
    )


def update_walk_request_to_walk(request: schemas.UpdateWalkRequest) -> models.Walk:
    return models.Walk(
        name=request.name,
        description=request.description,
        length_in_km=request.length_in_km,
        walk_image_url=request.walk_image_url,
        region_id=request.region_id,
        difficulty_id=request.difficulty_id,
    )
