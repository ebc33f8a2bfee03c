"""
SQLAlchemy models.

Exposes `Base` and the ORM classes so `rest_villains.db.models` can be used
as a single import point (Alembic's env.py relies on it).
"""

from .base import Base, IdentifierType  # re-export

from .villains import Villain

__all__ = [
    "Base",
    "IdentifierType",
    "Villain",
]
