"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import logging
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"
_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so engine creation
    at import time also checks whether pytest is already in ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces the answer.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _get_database_url() -> str:
    # Explicit URL wins over individual components
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    missing = [name for name in _POSTGRES_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{os.getenv('POSTGRES_USER')}:{os.getenv('POSTGRES_PASSWORD')}"
        f"@{os.getenv('POSTGRES_HOST')}:{os.getenv('POSTGRES_PORT')}/{os.getenv('POSTGRES_DB')}"
    )


def _resolve_database_url() -> str:
    # Test override order:
    # 1. NZWALKS_TEST_DB when set.
    # 2. In-memory sqlite when running under pytest, so unit tests never need Postgres.
    # 3. Otherwise the configured application database.
    explicit_test_db = os.getenv("NZWALKS_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if _is_pytest_runtime():
        return _SQLITE_MEMORY_URL
    return _get_database_url()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # StaticPool keeps one connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


def _create_engine_with_fallback(url: str, kwargs: dict):
    """Create the engine; under pytest fall back to in-memory sqlite if the driver can't connect."""
    try:
        return create_engine(url, **kwargs)
    except OperationalError:
        if _is_pytest_runtime() and not os.getenv("NZWALKS_TEST_DB"):
            logger.warning("database_fallback: using in-memory sqlite instead of %s", url)
            return create_engine(_SQLITE_MEMORY_URL, **_engine_kwargs(_SQLITE_MEMORY_URL))
        raise


DATABASE_URL = _resolve_database_url()

engine = _create_engine_with_fallback(DATABASE_URL, _engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# An in-memory sqlite database has no migrations applied; create the schema
# eagerly so every session sharing the StaticPool connection sees the tables.
_SCHEMA_INIT_DONE = False


def ensure_sqlite_schema():
    global _SCHEMA_INIT_DONE
    if _SCHEMA_INIT_DONE:
        return
    if str(engine.url).startswith("sqlite"):
        # local imports to avoid a cycle at module load
        from nzwalks.db import models
        from nzwalks.db.repositories import difficulties as difficulty_repo
        models.Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            difficulty_repo.seed_difficulties(db)
        finally:
            db.close()
    _SCHEMA_INIT_DONE = True


def get_db():
    """Dependency to get a database session."""
    ensure_sqlite_schema()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
