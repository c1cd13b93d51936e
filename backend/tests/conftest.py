# tests/conftest.py

import os

# must be set before enrollment.config builds its settings
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from enrollment.database.base import Base
from enrollment.database.models.student import Student, StudentCourse  # noqa: F401
from enrollment.database.session import get_db
from enrollment.database.student_repository import StudentRepository
from enrollment.schemas.student import StudentRecord
from enrollment.services.student_service import StudentService


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def repository(db_session):
    return StudentRepository(db_session)


@pytest.fixture
def service(repository):
    return StudentService(repository)


@pytest.fixture
def client(db_session):
    from enrollment.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_payload():
    return {
        "fullname": "Ana Li",
        "class": "10A",
        "mobileNumber": "555",
        "enrollmentNumber": "E100",
        "emailId": "a@x.com",
        "balance": 0,
        "address": "1 Rd",
        "stream": "Stream-1",
        "courses": [{"courseCode": "C1", "subject": "Math"}],
    }


@pytest.fixture
def second_payload():
    return {
        "fullname": "Ravi Kumar",
        "class": "11B",
        "mobileNumber": "9876543210",
        "enrollmentNumber": "E200",
        "referenceNumber": "REF-7",
        "emailId": "ravi@x.com",
        "balance": 1250.5,
        "address": "22 Hill St",
        "stream": "Stream-2",
        "courses": [
            {"courseCode": "P1", "subject": "Physics"},
            {"courseCode": "C2", "subject": "Chemistry"},
        ],
    }


@pytest.fixture
def sample_record(sample_payload):
    return StudentRecord.model_validate({**sample_payload, "id": "s001"})
