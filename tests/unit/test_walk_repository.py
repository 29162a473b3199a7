import uuid

import pytest

from nzwalks.db import models
from nzwalks.db.repositories import walks as walk_repo
from nzwalks.errors import ReferentialIntegrityError


def _walk(region_id, difficulty_id, **overrides):
    fields = dict(
        name="Coast Track",
        description="Golden sand",
        length_in_km=5.5,
        walk_image_url=None,
        region_id=region_id,
        difficulty_id=difficulty_id,
    )
    fields.update(overrides)
    return models.Walk(**fields)


def test_get_walks_empty(db):
    assert walk_repo.get_walks(db) == []


def test_create_walk_loads_region_and_difficulty(db, region_factory, difficulty_ids):
    region = region_factory()
    created = walk_repo.create_walk(db, _walk(region.id, difficulty_ids["Easy"]))

    assert isinstance(created.id, uuid.UUID)
    assert created.region.code == "AKL"
    assert created.difficulty.name == "Easy"

    fetched = walk_repo.get_walk(db, created.id)
    assert (fetched.name, fetched.description, fetched.length_in_km) == ("Coast Track", "Golden sand", 5.5)


def test_create_walk_with_unknown_region_is_rejected(db, difficulty_ids):
    with pytest.raises(ReferentialIntegrityError) as info:
        walk_repo.create_walk(db, _walk(uuid.uuid4(), difficulty_ids["Easy"]))
    assert info.value.field == "region_id"
    assert db.query(models.Walk).count() == 0


def test_create_walk_with_unknown_difficulty_is_rejected(db, region_factory):
    region = region_factory()
    with pytest.raises(ReferentialIntegrityError) as info:
        walk_repo.create_walk(db, _walk(region.id, uuid.uuid4()))
    assert info.value.field == "difficulty_id"


def test_update_walk_moves_region_and_keeps_id(db, region_factory, walk_factory, difficulty_ids):
    auckland = region_factory()
    northland = region_factory(code="NTL", name="Northland")
    walk = walk_factory(auckland)

    updated = walk_repo.update_walk(
        db,
        walk.id,
        _walk(northland.id, difficulty_ids["Hard"], name="Cape Reinga", length_in_km=9.0),
    )

    assert updated.id == walk.id
    assert updated.name == "Cape Reinga"
    assert updated.region.code == "NTL"
    assert updated.difficulty.name == "Hard"


def test_update_walk_with_unknown_region_leaves_row_untouched(db, region_factory, walk_factory, difficulty_ids):
    walk = walk_factory(region_factory())
    with pytest.raises(ReferentialIntegrityError):
        walk_repo.update_walk(db, walk.id, _walk(uuid.uuid4(), difficulty_ids["Easy"], name="Moved"))
    db.expire_all()
    assert walk_repo.get_walk(db, walk.id).name == "Coast Track"


def test_update_unknown_walk_returns_none(db, region_factory, difficulty_ids):
    region = region_factory()
    assert walk_repo.update_walk(db, uuid.uuid4(), _walk(region.id, difficulty_ids["Easy"])) is None
    assert db.query(models.Walk).count() == 0


def test_delete_walk_echoes_walk_with_relations(db, region_factory, walk_factory):
    region = region_factory()
    walk = walk_factory(region, name="Hillary Trail")
    walk_factory(region, name="Te Henga")

    deleted = walk_repo.delete_walk(db, walk.id)

    assert deleted.name == "Hillary Trail"
    assert deleted.region.code == "AKL"
    assert walk_repo.get_walk(db, walk.id) is None
    assert db.query(models.Walk).count() == 1


def test_delete_unknown_walk_returns_none(db):
    assert walk_repo.delete_walk(db, uuid.uuid4()) is None
