"""
Villain service: mediates between the HTTP resource and the villain repository.

Reads run against the request session as-is; every mutation is wrapped in
``transactional`` so it commits on success and rolls back on failure.
"""
import logging
import random
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from rest_villains.db import models, schemas
from rest_villains.db.database import get_db, transactional
from rest_villains.db.repositories import villains as villain_repo

logger = logging.getLogger(__name__)

# Fields overwritten by a full update; the identifier is never among them.
MUTABLE_FIELDS = ("name", "other_name", "level", "picture", "powers")


class VillainNotFoundError(LookupError):
    """Raised when a mutation targets an identifier that is not stored."""

    def __init__(self, villain_id: int):
        super().__init__(f"Villain with id {villain_id} not found")
        self.villain_id = villain_id


class VillainService:
    """Service class for villain operations."""

    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng or random.Random()

    def find_all_villains(self) -> List[models.Villain]:
        return villain_repo.get_villains(self.db)

    def find_villain_by_id(self, villain_id: int) -> Optional[models.Villain]:
        return villain_repo.get_villain(self.db, villain_id)

    def count_villains(self) -> int:
        return villain_repo.count_villains(self.db)

    def find_random_villain(self) -> Optional[models.Villain]:
        """Return a uniformly chosen villain, or None when the store is empty.

        Counts first, then loads the row at a random offset in one query.
        A row deleted between the two statements yields None as well.
        """
        total = self.count_villains()
        if total == 0:
            return None
        return villain_repo.get_villain_at_offset(self.db, self.rng.randrange(total))

    def persist_villain(self, villain: schemas.VillainCreate) -> models.Villain:
        fields = villain.model_dump(include=set(MUTABLE_FIELDS))
        with transactional(self.db):
            db_villain = villain_repo.create_villain(self.db, **fields)
        logger.info("Persisted villain id=%s name=%s", db_villain.id, db_villain.name)
        return db_villain

    def update_villain(self, villain: schemas.VillainUpdate) -> models.Villain:
        """Overwrite every mutable field of the stored villain with ``villain``'s values.

        Optional fields missing from the payload are written as None; this is a
        replacement, not a merge.
        """
        with transactional(self.db):
            db_villain = villain_repo.get_villain(self.db, villain.id)
            if db_villain is None:
                logger.warning("Update requested for unknown villain id=%s", villain.id)
                raise VillainNotFoundError(villain.id)
            for field in MUTABLE_FIELDS:
                setattr(db_villain, field, getattr(villain, field))
        logger.info("Updated villain id=%s", db_villain.id)
        return db_villain

    def delete_villain(self, villain_id: int) -> None:
        with transactional(self.db):
            db_villain = villain_repo.get_villain(self.db, villain_id)
            if db_villain is None:
                logger.warning("Delete requested for unknown villain id=%s", villain_id)
                raise VillainNotFoundError(villain_id)
            villain_repo.delete_villain(self.db, db_villain)
        logger.info("Deleted villain id=%s", villain_id)


def get_villain_service(db: Session = Depends(get_db)) -> VillainService:
    """FastAPI dependency building a service around the request session."""
    return VillainService(db)
