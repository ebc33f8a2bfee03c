"""
Villain repository functions.

Single-statement reads and writes on the ``villain`` table. Callers own the
transaction: writes flush so identifiers are assigned, but never commit.
"""
from __future__ import annotations

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from rest_villains.db import models


def get_villains(db: Session):
    return db.query(models.Villain).all()


def get_villain(db: Session, villain_id: int) -> Optional[models.Villain]:
    return db.get(models.Villain, villain_id)


def count_villains(db: Session) -> int:
    return db.query(func.count(models.Villain.id)).scalar() or 0


def get_villain_at_offset(db: Session, offset: int) -> Optional[models.Villain]:
    """Return the villain at ``offset`` in primary-key order, if any."""
    return (
        db.query(models.Villain)
        .order_by(models.Villain.id)
        .offset(offset)
        .limit(1)
        .first()
    )


def create_villain(db: Session, **fields) -> models.Villain:
    db_villain = models.Villain(**fields)
    db.add(db_villain)
    db.flush()
    return db_villain


def delete_villain(db: Session, db_villain: models.Villain) -> None:
    db.delete(db_villain)
    db.flush()
