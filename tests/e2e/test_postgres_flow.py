"""
End-to-end flow against PostgreSQL with the schema created by Alembic.
"""
import uuid

from nzwalks.db import models


def test_migration_seeds_difficulties(pg_client):
    r = pg_client.get("/api/difficulties")
    assert r.status_code == 200
    seeded = {d["name"]: d["id"] for d in r.json()}
    assert seeded == {name: str(difficulty_id) for difficulty_id, name in models.DEFAULT_DIFFICULTIES}


def test_region_and_walk_lifecycle(pg_client):
    code = f"E{uuid.uuid4().hex[:4]}"
    region = pg_client.post("/api/regions", json={"code": code, "name": "E2E Region"}).json()
    easy_id = str(models.DEFAULT_DIFFICULTIES[0][0])

    r_walk = pg_client.post(
        "/api/walks",
        json={
            "name": "Queen Charlotte Track",
            "description": "Sounds",
            "lengthInKm": 73.5,
            "regionId": region["id"],
            "difficultyId": easy_id,
        },
    )
    assert r_walk.status_code == 201, r_walk.text
    walk = r_walk.json()
    assert walk["region"]["code"] == code

    assert pg_client.get(f"/api/walks/{walk['id']}").json() == walk

    r_bad = pg_client.post(
        "/api/walks",
        json={
            "name": "Nowhere",
            "description": "",
            "lengthInKm": 1,
            "regionId": str(uuid.uuid4()),
            "difficultyId": easy_id,
        },
    )
    assert r_bad.status_code == 422

    assert pg_client.delete(f"/api/regions/{region['id']}").status_code == 200
    assert pg_client.get(f"/api/walks/{walk['id']}").status_code == 404
