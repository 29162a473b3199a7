"""
Regions API endpoints.

List, fetch, create, update and delete regions.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from nzwalks.api import mappers
from nzwalks.api.deps import parse_identifier
from nzwalks.db import schemas
from nzwalks.db.database import get_db
from nzwalks.db.repositories import regions as region_repo

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_model=List[schemas.Region])
def get_all_regions_endpoint(db: Session = Depends(get_db)):
    return mappers.regions_to_dto(region_repo.get_regions(db))


@router.get("/{id}", response_model=schemas.Region)
def get_region_endpoint(
    region_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    region = region_repo.get_region(db, region_id)
    if region is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.region_to_dto(region)


@router.post("", response_model=schemas.Region, status_code=status.HTTP_201_CREATED)
def create_region_endpoint(
    payload: schemas.AddRegionRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    region = region_repo.create_region(db, mappers.add_region_request_to_region(payload))
    dto = mappers.region_to_dto(region)
    response.headers["Location"] = str(request.url_for("get_region_endpoint", id=str(dto.id)))
    return dto


@router.put("/{id}", response_model=schemas.Region)
def update_region_endpoint(
    payload: schemas.UpdateRegionRequest,
    region_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    region = region_repo.update_region(db, region_id, mappers.update_region_request_to_region(payload))
    if region is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.region_to_dto(region)


@router.delete("/{id}", response_model=schemas.Region)
def delete_region_endpoint(
    region_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    region = region_repo.delete_region(db, region_id)
    if region is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.region_to_dto(region)
