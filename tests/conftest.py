"""Pytest configuration and shared fixtures.

Environment overrides must be in place before ``config`` is imported, so they
are set at module import time.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["ADMIN_TOKEN"] = "test-admin-token"

from collections.abc import Generator
from typing import Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import create_app

ADMIN_TOKEN = "test-admin-token"
PASSWORD = "secret123"


@pytest.fixture
def app() -> FastAPI:
    """Fresh application backed by its own in-memory database."""
    return create_app("sqlite://")


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


def register(
    client: TestClient,
    username: str,
    role: str = "user",
    password: str = PASSWORD,
    email: str = None,
) -> dict:
    payload = {"username": username, "password": password, "role": role, "email": email}
    if role == "admin":
        payload["admin_token"] = ADMIN_TOKEN
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["user"]


def login(client: TestClient, username: str, password: str = PASSWORD) -> str:
    response = client.post(
        "/api/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def tenant_a(client: TestClient) -> str:
    """Token of a regular account named alice."""
    register(client, "alice")
    return login(client, "alice")


@pytest.fixture
def tenant_b(client: TestClient) -> str:
    """Token of a regular account named bob."""
    register(client, "bob")
    return login(client, "bob")


@pytest.fixture
def admin_token(client: TestClient) -> str:
    register(client, "root", role="admin")
    return login(client, "root")
