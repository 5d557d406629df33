import os
import uuid

import pytest

# Set testing environment before the application is imported
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sehaty.main import app
from sehaty.core.database import get_db, Base
from sehaty import models  # noqa: F401

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def register_user(client):
    """Register a user and return ``(user, auth headers)``."""
    def _register(role="patient", **fields):
        payload = {
            "name": fields.pop("name", f"Test {role.title()}"),
            "email": fields.pop("email", f"{role}-{uuid.uuid4().hex[:8]}@example.com"),
            "password": fields.pop("password", "TestPassword123"),
            "role": role,
        }
        payload.update(fields)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return _register

@pytest.fixture
def patient(register_user):
    return register_user("patient", name="Pat Patient")

@pytest.fixture
def doctor(register_user):
    return register_user("doctor", name="Dana Doctor", specialty="Cardiology", location="Cairo")
