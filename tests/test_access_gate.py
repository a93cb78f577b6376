"""Tests for token extraction and role checks on protected routes."""

import pytest
from fastapi.testclient import TestClient

from conftest import bearer, login, register
from core.dependencies import authorize
from core.exceptions import ForbiddenError, InvalidTokenError, MissingTokenError
from core.security import create_access_token


class TestAuthorize:
    def test_missing_token(self) -> None:
        with pytest.raises(MissingTokenError):
            authorize(None)

    def test_invalid_token(self) -> None:
        with pytest.raises(InvalidTokenError):
            authorize("not-a-token")

    def test_role_mismatch_is_forbidden_not_unauthenticated(self) -> None:
        token = create_access_token("account-1", "user")

        with pytest.raises(ForbiddenError):
            authorize(token, require_role="admin")

    def test_matching_role_returns_principal(self) -> None:
        token = create_access_token("account-1", "admin")

        principal = authorize(token, require_role="admin")

        assert principal.subject_id == "account-1"
        assert principal.is_admin


class TestTokenLocations:
    def test_no_token_anywhere_is_401(self, client: TestClient) -> None:
        response = client.get("/api/students")

        assert response.status_code == 401
        assert response.json() == {"error": "No authentication token provided"}

    def test_invalid_token_is_401(self, client: TestClient) -> None:
        response = client.get("/api/students", headers=bearer("garbage"))

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_query_parameter(self, client: TestClient, tenant_a: str) -> None:
        response = client.get("/api/students", params={"token": tenant_a})

        assert response.status_code == 200
        assert response.json() == {"students": []}

    def test_body_field(self, client: TestClient, tenant_a: str) -> None:
        response = client.post("/api/auth/verify", json={"token": tenant_a})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"

    def test_body_field_alongside_resource_fields(
        self, client: TestClient, tenant_a: str
    ) -> None:
        response = client.post("/api/students", json={"token": tenant_a, "name": "Sara"})

        assert response.status_code == 200
        assert response.json()["student"]["name"] == "Sara"

    def test_header_takes_precedence_over_query(
        self, client: TestClient, tenant_a: str
    ) -> None:
        ok = client.get("/api/students", headers=bearer(tenant_a), params={"token": "garbage"})
        rejected = client.get("/api/students", headers=bearer("garbage"), params={"token": tenant_a})

        assert ok.status_code == 200
        assert rejected.status_code == 401

    def test_query_takes_precedence_over_body(
        self, client: TestClient, tenant_a: str
    ) -> None:
        response = client.post(
            "/api/auth/verify", params={"token": "garbage"}, json={"token": tenant_a}
        )

        assert response.status_code == 401


class TestAdminRole:
    def test_user_token_on_admin_route_is_403(self, client: TestClient, tenant_a: str) -> None:
        response = client.get("/api/admin/users", headers=bearer(tenant_a))

        assert response.status_code == 403
        assert "error" in response.json()

    def test_admin_token_on_admin_route(self, client: TestClient, admin_token: str) -> None:
        response = client.get("/api/admin/users", headers=bearer(admin_token))

        assert response.status_code == 200

    def test_verify_reports_deleted_account(self, client: TestClient, admin_token: str) -> None:
        user = register(client, "temp")
        token = login(client, "temp")
        client.delete(f"/api/admin/users/{user['user_id']}", headers=bearer(admin_token))

        response = client.post("/api/auth/verify", json={"token": token})

        assert response.status_code == 404
