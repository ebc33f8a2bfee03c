"""
App assembly entry point.

Re-exports the FastAPI `app` from `rest_villains.api.main` so the service can
be started with ``uvicorn app:app``.
"""

from rest_villains.api.main import app  # noqa: F401
