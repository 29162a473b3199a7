"""
Region repository functions.

Implements list/get/create/update/delete for regions. Deleting a region
removes its walks through the ORM cascade.
"""
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nzwalks.db import models
from nzwalks.errors import StorageError

logger = logging.getLogger(__name__)

# Fields replaced wholesale by update_region
_MUTABLE_FIELDS = ("code", "name", "region_image_url")


def get_regions(db: Session) -> List[models.Region]:
    return db.query(models.Region).order_by(models.Region.created_at, models.Region.id).all()


def get_region(db: Session, region_id: uuid.UUID) -> Optional[models.Region]:
    return db.query(models.Region).filter(models.Region.id == region_id).first()


def create_region(db: Session, region: models.Region) -> models.Region:
    if region.id is None:
        region.id = uuid.uuid4()
    try:
        db.add(region)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("region_create_failed: code=%s", region.code, exc_info=True)
        raise StorageError(f"Failed to create region {region.id}") from e
    db.refresh(region)
    logger.info("region_created: id=%s code=%s", region.id, region.code)
    return region


def update_region(db: Session, region_id: uuid.UUID, region: models.Region) -> Optional[models.Region]:
    db_region = get_region(db, region_id)
    if db_region is None:
        return None
    for field in _MUTABLE_FIELDS:
        setattr(db_region, field, getattr(region, field))
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("region_update_failed: id=%s", region_id, exc_info=True)
        raise StorageError(f"Failed to update region {region_id}") from e
    db.refresh(db_region)
    logger.info("region_updated: id=%s", region_id)
    return db_region


def delete_region(db: Session, region_id: uuid.UUID) -> Optional[models.Region]:
    db_region = get_region(db, region_id)
    if db_region is None:
        return None
    try:
        db.delete(db_region)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("region_delete_failed: id=%s", region_id, exc_info=True)
        raise StorageError(f"Failed to delete region {region_id}") from e
    logger.info("region_deleted: id=%s", region_id)
    return db_region


def get_region_by_code(db: Session, code: str) -> Optional[models.Region]:
    return db.query(models.Region).filter(models.Region.code == code).first()
