"""
SQLAlchemy models split by resource.

Exposes `Base`, `now_utc` and the ORM classes so callers can keep using
`from nzwalks.db import models`.
"""

from .base import Base, now_utc  # re-export

from .regions import Region
from .difficulties import Difficulty, DEFAULT_DIFFICULTIES
from .walks import Walk

__all__ = [
    "Base",
    "now_utc",
    "Region",
    "Difficulty",
    "DEFAULT_DIFFICULTIES",
    "Walk",
]
