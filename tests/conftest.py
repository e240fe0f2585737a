"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from booking_backend.core.config import Settings
from booking_backend.main import create_app

TEST_SECRET_KEY = "test-secret-key"

# Test data
alice_signup = {
    "accountName": "Alice",
    "email": "a@x.com",
    "password": "pw1",
}

bob_signup = {
    "accountName": "Bob",
    "email": "b@x.com",
    "password": "pw2",
}


@pytest.fixture
def settings():
    # In-memory database and the cheapest bcrypt cost keep tests fast
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY=TEST_SECRET_KEY,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    """Database session on the same engine the client talks to."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def authenticator(app):
    return app.state.authenticator


def sign_up_and_in(client, signup_data):
    """Create an account and return Authorization headers for it."""
    response = client.post("/signup", json=signup_data)
    assert response.status_code == 201

    response = client.post(
        "/signin",
        json={"email": signup_data["email"], "password": signup_data["password"]},
    )
    assert response.status_code == 200

    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def alice_headers(client):
    return sign_up_and_in(client, alice_signup)


@pytest.fixture
def bob_headers(client):
    return sign_up_and_in(client, bob_signup)
