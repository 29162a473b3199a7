"""Difficulty repository: read access plus idempotent seeding of the reference rows."""
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from nzwalks.db import models

logger = logging.getLogger(__name__)


def get_difficulties(db: Session) -> List[models.Difficulty]:
    return db.query(models.Difficulty).order_by(models.Difficulty.name).all()


def get_difficulty(db: Session, difficulty_id: uuid.UUID) -> Optional[models.Difficulty]:
    return db.query(models.Difficulty).filter(models.Difficulty.id == difficulty_id).first()


def seed_difficulties(db: Session) -> int:
    """Insert any missing default difficulties; return how many were added."""
    existing = {d.id for d in db.query(models.Difficulty.id).all()}
    added = 0
    for difficulty_id, name in models.DEFAULT_DIFFICULTIES:
        if difficulty_id in existing:
            continue
        db.add(models.Difficulty(id=difficulty_id, name=name))
        added += 1
    if added:
        db.commit()
        logger.info("difficulties_seeded: count=%d", added)
    return added
