"""Difficulties API endpoints (read-only reference data)."""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from nzwalks.api import mappers
from nzwalks.api.deps import parse_identifier
from nzwalks.db import schemas
from nzwalks.db.database import get_db
from nzwalks.db.repositories import difficulties as difficulty_repo

router = APIRouter(prefix="/difficulties", tags=["difficulties"])


@router.get("", response_model=List[schemas.Difficulty])
def get_all_difficulties_endpoint(db: Session = Depends(get_db)):
    return mappers.difficulties_to_dto(difficulty_repo.get_difficulties(db))


@router.get("/{id}", response_model=schemas.Difficulty)
def get_difficulty_endpoint(
    difficulty_id: uuid.UUID = Depends(parse_identifier),
    db: Session = Depends(get_db),
):
    difficulty = difficulty_repo.get_difficulty(db, difficulty_id)
    if difficulty is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return mappers.difficulty_to_dto(difficulty)
