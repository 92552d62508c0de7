"""Shared pytest fixtures for the PG Finder test suite.

Each test gets its own application built by ``create_app`` against a private
in-memory SQLite database.
"""

import os

# Keep the module-level ``pgfinder.main.app`` off the on-disk database.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from pgfinder.config import Settings
from pgfinder.main import create_app
from pgfinder.services.auth import AuthService

from tests.helpers import signup


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        password_hash_iterations=1000,
        log_level="DEBUG",
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def auth_service(settings) -> AuthService:
    return AuthService(settings)


@pytest.fixture()
def owner_token(client):
    return signup(client, "owner")["token"]


@pytest.fixture()
def admin_token(client):
    return signup(client, "admin")["token"]


@pytest.fixture()
def student_token(client):
    return signup(client, "student")["token"]
