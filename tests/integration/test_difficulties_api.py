import uuid


def test_list_difficulties(client):
    r = client.get("/api/difficulties")
    assert r.status_code == 200
    assert sorted(d["name"] for d in r.json()) == ["Easy", "Hard", "Medium"]


def test_get_difficulty(client, difficulty_ids):
    r = client.get(f"/api/difficulties/{difficulty_ids['Easy']}")
    assert r.status_code == 200
    assert r.json() == {"id": str(difficulty_ids["Easy"]), "name": "Easy"}


def test_get_unknown_difficulty_is_404(client):
    assert client.get(f"/api/difficulties/{uuid.uuid4()}").status_code == 404


def test_difficulties_are_read_only(client, difficulty_ids):
    assert client.post("/api/difficulties", json={"name": "Extreme"}).status_code == 405
    assert client.delete(f"/api/difficulties/{difficulty_ids['Easy']}").status_code == 405
