import os
import shutil
import subprocess
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from nzwalks.api.main import app
from nzwalks.db.database import get_db

SERVICE_ROOT = Path(__file__).resolve().parents[2]


def _require_docker():
    if os.getenv("SKIP_DOCKER_TESTS") == "1":
        pytest.skip("SKIP_DOCKER_TESTS=1")
    if not shutil.which("docker"):
        pytest.skip("Docker CLI is not available; skipping e2e tests that require containers")
    try:
        proc = subprocess.run(["docker", "info"], capture_output=True, text=True, timeout=5)
    except (OSError, subprocess.TimeoutExpired):
        pytest.skip("Docker daemon is not available; skipping e2e tests that require containers")
    if proc.returncode != 0:
        pytest.skip("Docker daemon is not available; skipping e2e tests that require containers")


@pytest.fixture(scope="session")
def postgres_url():
    _require_docker()
    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image, driver=None) as pg:
        yield pg.get_connection_url()


@pytest.fixture(scope="session")
def migrated_engine(postgres_url):
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "migrations"))
    previous = os.environ.get("TEST_DATABASE_URL")
    os.environ["TEST_DATABASE_URL"] = postgres_url
    try:
        command.upgrade(cfg, "head")
    finally:
        if previous is None:
            os.environ.pop("TEST_DATABASE_URL", None)
        else:
            os.environ["TEST_DATABASE_URL"] = previous
    engine = create_engine(postgres_url, future=True)
    yield engine
    engine.dispose()


@pytest.fixture
def pg_client(migrated_engine):
    SessionPG = sessionmaker(bind=migrated_engine, autocommit=False, autoflush=False)

    def _override_get_db():
        db = SessionPG()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
