"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an in-memory
SQLite fallback under pytest, and exposes the FastAPI session dependency plus
the explicit unit-of-work helper used by every mutating service call.
"""
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


# Database connection URL
# Generate dynamically from individual components if DATABASE_URL is not provided
def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    values = {name: os.getenv(name) for name in _POSTGRES_VARS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
        f"@{values['POSTGRES_HOST']}:{values['POSTGRES_PORT']}/{values['POSTGRES_DB']}"
    )


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while an individual test is running,
    so at collection time we also look for the pytest package in
    ``sys.modules``. ``PYTEST_RUNNING=1`` forces the answer.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def resolve_database_url() -> tuple[str, dict]:
    """Return the URL and engine keyword arguments for the running context.

    Precedence:
    1. ``VILLAINS_TEST_DB`` (explicit test database).
    2. ``TEST_DATABASE_URL`` (set by e2e fixtures; never replaced with sqlite).
    3. Under pytest, an in-memory SQLite database shared through StaticPool.
    4. ``DATABASE_URL`` or the ``POSTGRES_*`` components.
    """
    explicit_test_db = os.getenv("VILLAINS_TEST_DB")
    explicit_e2e_db = os.getenv("TEST_DATABASE_URL")

    if explicit_test_db:
        kwargs = {"connect_args": {"check_same_thread": False}} if explicit_test_db.startswith("sqlite") else {}
        return explicit_test_db, kwargs
    if explicit_e2e_db:
        return explicit_e2e_db, {}
    if _is_pytest_runtime():
        # StaticPool keeps the single in-memory connection (and its schema) alive
        return SQLITE_MEMORY_URL, {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return _get_database_url(), {}


DATABASE_URL, _engine_kwargs = resolve_database_url()

engine = create_engine(DATABASE_URL, **_engine_kwargs)

# Schema is owned by Alembic; the throwaway in-memory database is the exception.
if DATABASE_URL == SQLITE_MEMORY_URL:
    from rest_villains.db import models  # local import to avoid circular import at module load
    models.Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """Run the enclosed block as one unit of work.

    Commits when the block exits normally; rolls back and re-raises on any
    exception so no partial write survives.
    """
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.info("Rolling back transaction: %s", e)
        db.rollback()
        raise
