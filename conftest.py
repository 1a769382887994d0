import os

# Keep the app's own engine off disk; tests bind their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from database import Base, get_db
from main import app


@pytest.fixture(scope="function")
def engine():
    # Fresh in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()

@pytest.fixture(scope="function")
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def dune():
    return {
        "genre": "Science fiction",
        "author": "Herbert",
        "image": "dune.png",
        "title": "Dune",
        "subtitle": "Book one",
        "publisher": "Chilton",
        "year": "1965",
        "pages": 412,
        "isbn": "X",
    }

@pytest.fixture
def alice():
    return {"username": "alice", "name": "Alice Liddell", "birthdate": "1990-05-04"}
