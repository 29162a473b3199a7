"""
FastAPI app assembly: logging, middleware, exception handlers and router wiring.
"""
import logging
import os
from fastapi import FastAPI, Depends, APIRouter, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from nzwalks.api.errors import register_exception_handlers
from nzwalks.api.regions import router as regions_router
from nzwalks.api.walks import router as walks_router
from nzwalks.api.difficulties import router as difficulties_router
from nzwalks.db.database import get_db

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="NZ Walks API",
    description="API for managing New Zealand regions, walks and walk difficulties.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def _cors_origins() -> list:
    raw = os.getenv("CORS_ORIGINS", "")
    if not raw.strip():
        return DEFAULT_CORS_ORIGINS
    return [o.strip() for o in raw.split(",") if o.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

register_exception_handlers(app)

api_router = APIRouter(prefix="/api")
api_router.include_router(regions_router)
api_router.include_router(walks_router)
api_router.include_router(difficulties_router)
app.include_router(api_router)


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Liveness plus a trivial database round trip."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.error("health_check: database unreachable", exc_info=True)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="database unavailable")
    return {"status": "healthy", "database": "ok"}
