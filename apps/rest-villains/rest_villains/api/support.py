"""
Support endpoints.

Liveness/readiness probe that checks the database connection.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_villains.db.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["support"])  # keep paths stable (no prefix)

SERVICE_NAME = "rest-villains"


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Report service health, including a round trip to the database."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health_check: database ping failed")
        return JSONResponse(
            {"status": "degraded", "service": SERVICE_NAME, "database": "unavailable"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return {"status": "ok", "service": SERVICE_NAME, "database": "ok"}
