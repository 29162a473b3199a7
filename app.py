"""
App assembly entry point.

Re-exports the FastAPI `app` from `nzwalks.api.main` so servers can target
`app:app`.
"""

from nzwalks.api.main import app  # noqa: F401
