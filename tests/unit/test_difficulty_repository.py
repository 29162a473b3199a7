import uuid

from nzwalks.db import models
from nzwalks.db.repositories import difficulties as difficulty_repo


def test_default_difficulties_are_seeded(db):
    names = {d.name for d in difficulty_repo.get_difficulties(db)}
    assert names == {"Easy", "Medium", "Hard"}


def test_get_difficulty_by_id(db, difficulty_ids):
    assert difficulty_repo.get_difficulty(db, difficulty_ids["Medium"]).name == "Medium"
    assert difficulty_repo.get_difficulty(db, uuid.uuid4()) is None


def test_seed_is_idempotent(db):
    assert difficulty_repo.seed_difficulties(db) == 0
    assert db.query(models.Difficulty).count() == len(models.DEFAULT_DIFFICULTIES)
