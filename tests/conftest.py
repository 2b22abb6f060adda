import sys
from pathlib import Path

# Put the project root on the path first
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# SQLite engine for tests, created BEFORE importing the app
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: swap the engine and SessionLocal BEFORE importing the app
import trustbyte.core.database
trustbyte.core.database.engine = test_engine
trustbyte.core.database.SessionLocal = TestingSessionLocal

from trustbyte.core.database import Base, get_db
from trustbyte.main import app
from trustbyte.schemas.task import Task, TaskPriority, TaskStatus


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Fresh tables for every test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client():
    """FastAPI test client"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def register(client):
    def _register(name="Jane", email="jane@x.com", password="secret123"):
        return client.post("/auth/register", json={"name": name, "email": email, "password": password})
    return _register


@pytest.fixture
def auth_token(client, register):
    """Registers jane@x.com and returns the JWT"""
    register()
    response = client.post("/auth/login", json={"email": "jane@x.com", "password": "secret123"})
    return response.json()["jwtToken"]


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def make_task():
    """Builds client-side Task records"""
    counter = {"n": 0}

    def _make(title=None, status=TaskStatus.TODO, priority=TaskPriority.MEDIUM, due=None, id=None):
        counter["n"] += 1
        n = counter["n"]
        return Task(
            id=id or f"t{n}",
            title=title or f"Task {n}",
            status=status,
            priority=priority,
            due_date=due,
            owner="jane@x.com",
        )
    return _make
