"""
Walks API endpoints.

CRUD for walks. Responses embed the walk's region and difficulty; writes
referencing an unknown region or difficulty are rejected with 422.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from nzwalks.api import mappers
from nzwalks.api.deps import parse_identifier
from nzwalks.db import schemas
from nzwalks.db.database import get_db
from nzwalks.db.repositories import walks as walk_repo

router = APIRouter(prefix="/walks", tags=["walks"])


@router.get("", response_model=List[schemas.Walk])
def get_all_walks_endpoint(db: Session = Depends(get_db)):
    return mappers.walks_to_dto(walk_repo.get_walks(db))


@router.get("/{id}", response_model=schemas.Walk)
def get_walk_endpoint(
    walk_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    walk = walk_repo.get_walk(db, walk_id)
    if walk is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.walk_to_dto(walk)


@router.post("", response_model=schemas.Walk, status_code=status.HTTP_201_CREATED)
def create_walk_endpoint(
    payload: schemas.AddWalkRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    walk = walk_repo.create_walk(db, mappers.add_walk_request_to_walk(payload))
    dto = mappers.walk_to_dto(walk)
    response.headers["Location"] = str(request.url_for("get_walk_endpoint", id=str(dto.id)))
    return dto


@router.put("/{id}", response_model=schemas.Walk)
def update_walk_endpoint(
    payload: schemas.UpdateWalkRequest,
    walk_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    walk = walk_repo.update_walk(db, walk_id, mappers.update_walk_request_to_walk(payload))
    if walk is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.walk_to_dto(walk)


@router.delete("/{id}", response_model=schemas.Walk)
def delete_walk_endpoint(
    walk_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    walk = walk_repo.delete_walk(db, walk_id)
    if walk is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.walk_to_dto(walk)
