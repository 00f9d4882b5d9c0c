"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An application built around an in-memory SQLite database
- FastAPI test client
- Direct database sessions and sample payloads
"""

import pytest
from fastapi.testclient import TestClient

from jobby.core.config import Settings
from main import create_app


TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    """Settings for a fresh in-memory database (fast, isolated)"""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """
    FastAPI test client. Entering the client runs startup, which creates the tables.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client, app):
    """Session bound to the same database the client talks to."""
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def signup(client):
    """Register a user and return the session token."""
    def _signup(username="alice", password="pw1", email="alice@example.com"):
        response = client.post(
            "/signup",
            json={"username": username, "password": password, "email": email}
        )
        assert response.status_code == 200
        return response.json()["token"]

    return _signup


@pytest.fixture
def auth_headers(signup):
    """Authorization header for a freshly registered user"""
    return {"Authorization": f"Bearer {signup()}"}


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Backend Engineer",
        "company_logo_url": "https://assets.example.com/logos/acme.png",
        "rating": 4.2,
        "job_description": "Build and operate the services behind our job board.",
        "location": "Bangalore",
        "employment_type": "Full Time",
        "package_per_annum": "21 LPA",
        "company_website_url": "https://acme.example.com",
        "life_at_company": {
            "description": "Small teams, quick releases.",
            "image_url": "https://assets.example.com/life/acme.png"
        },
        "skills": [
            {"name": "Python", "image_url": "https://assets.example.com/skills/python.png"},
            {"name": "PostgreSQL", "image_url": "https://assets.example.com/skills/pg.png"}
        ]
    }


@pytest.fixture
def minimal_job_data():
    """Job payload with only the required fields"""
    return {
        "title": "Data Analyst",
        "job_description": "Turn hiring data into weekly reports.",
        "location": "Remote",
        "employment_type": "Part Time",
        "package_per_annum": "9 LPA"
    }
