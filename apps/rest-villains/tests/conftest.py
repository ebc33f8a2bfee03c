import os
import pytest
from fastapi.testclient import TestClient

# Unit and API tests run against the in-memory SQLite engine; make sure a
# developer's shell configuration cannot redirect them to a real database.
for _var in ("VILLAINS_TEST_DB", "TEST_DATABASE_URL"):
    os.environ.pop(_var, None)

from rest_villains.api.main import app
from rest_villains.db import models
from rest_villains.db.database import SessionLocal, engine


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory lives per process)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty every table between tests without dropping metadata."""
    yield
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def villain_factory(db_session):
    def _create(name: str = "Thanos", level: int = 10, **fields):
        villain = models.Villain(name=name, level=level, **fields)
        db_session.add(villain)
        db_session.commit()
        db_session.refresh(villain)
        return villain
    return _create
