"""
Walk repository functions.

Implements list/get/create/update/delete for walks. Writes verify that the
referenced region and difficulty exist before touching the store, so a bad
reference never leaves a partial row behind.
"""
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from nzwalks.db import models
from nzwalks.errors import ReferentialIntegrityError, StorageError

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = (
    "name",
    "description",
    "length_in_km",
    "walk_image_url",
    "region_id",
    "difficulty_id",
)


def _walk_query(db: Session):
    # Responses embed the region and difficulty, so load them with the walk
    return db.query(models.Walk).options(
        joinedload(models.Walk.region),
        joinedload(models.Walk.difficulty),
    )


def _ensure_references(db: Session, walk: models.Walk) -> None:
    if walk.region_id is None or db.get(models.Region, walk.region_id) is None:
        raise ReferentialIntegrityError("region_id", walk.region_id)
    if walk.difficulty_id is None or db.get(models.Difficulty, walk.difficulty_id) is None:
        raise ReferentialIntegrityError("difficulty_id", walk.difficulty_id)


def _commit(db: Session, action: str, walk_id) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("walk_%s_rejected: id=%s", action, walk_id, exc_info=True)
        raise ReferentialIntegrityError("walk", walk_id) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("walk_%s_failed: id=%s", action, walk_id, exc_info=True)
        raise StorageError(f"Failed to {action} walk {walk_id}") from e


def get_walks(db: Session) -> List[models.Walk]:
    return _walk_query(db).order_by(models.Walk.created_at, models.Walk.id).all()


def get_walk(db: Session, walk_id: uuid.UUID) -> Optional[models.Walk]:
    return _walk_query(db).filter(models.Walk.id == walk_id).first()


def create_walk(db: Session, walk: models.Walk) -> models.Walk:
    _ensure_references(db, walk)
    if walk.id is None:
        walk.id = uuid.uuid4()
    db.add(walk)
    _commit(db, "create", walk.id)
    db.refresh(walk)
    logger.info("walk_created: id=%s region_id=%s", walk.id, walk.region_id)
    return walk


def update_walk(db: Session, walk_id: uuid.UUID, walk: models.Walk) -> Optional[models.Walk]:
    db_walk = get_walk(db, walk_id)
    if db_walk is None:
        return None
    _ensure_references(db, walk)
    for field in _MUTABLE_FIELDS:
        setattr(db_walk, field, getattr(walk, field))
    _commit(db, "update", walk_id)
    db.refresh(db_walk)
    logger.info("walk_updated: id=%s", walk_id)
    return db_walk


def delete_walk(db: Session, walk_id: uuid.UUID) -> Optional[models.Walk]:
    db_walk = get_walk(db, walk_id)
    if db_walk is None:
        return None
    db.delete(db_walk)
    _commit(db, "delete", walk_id)
    logger.info("walk_deleted: id=%s", walk_id)
    return db_walk
