import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from nzwalks.api.main import app
from nzwalks.db import models
from nzwalks.db.database import SessionLocal, ensure_sqlite_schema


# Difficulties are reference data seeded with the schema; everything else is
# wiped around each test.
_REFERENCE_TABLES = {"difficulties"}


def _clean(db: Session) -> None:
    for table in reversed(models.Base.metadata.sorted_tables):
        if table.name not in _REFERENCE_TABLES:
            db.execute(table.delete())
    db.commit()


@pytest.fixture
def db_session():
    ensure_sqlite_schema()
    session = SessionLocal()
    _clean(session)
    try:
        yield session
    finally:
        session.rollback()
        _clean(session)
        session.close()


# Backwards compatibility: some tests expect a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client(db_session):
    return TestClient(app)


@pytest.fixture
def region_factory(db_session: Session):
    def _create(code: str = "AKL", name: str = "Auckland", region_image_url: str | None = None):
        region = models.Region(code=code, name=name, region_image_url=region_image_url)
        db_session.add(region)
        db_session.commit()
        db_session.refresh(region)
        return region
    return _create


@pytest.fixture
def difficulty_ids():
    return {name: difficulty_id for difficulty_id, name in models.DEFAULT_DIFFICULTIES}


@pytest.fixture
def walk_factory(db_session: Session, difficulty_ids):
    def _create(region, name: str = "Coast Track", length_in_km: float = 5.0, difficulty: str = "Easy", **extra):
        walk = models.Walk(
            name=name,
            description=extra.pop("description", "A walk"),
            length_in_km=length_in_km,
            walk_image_url=extra.pop("walk_image_url", None),
            region_id=region.id,
            difficulty_id=difficulty_ids[difficulty],
        )
        db_session.add(walk)
        db_session.commit()
        db_session.refresh(walk)
        return walk
    return _create


@pytest.fixture
def walk_payload(difficulty_ids):
    def _payload(region_id, **overrides):
        body = {
            "name": "Tongariro Crossing",
            "description": "Alpine crossing",
            "lengthInKm": 19.4,
            "walkImageUrl": None,
            "regionId": str(region_id),
            "difficultyId": str(difficulty_ids["Hard"]),
        }
        body.update(overrides)
        return body
    return _payload
