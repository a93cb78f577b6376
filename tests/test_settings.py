"""Tests for the settings endpoints."""

from fastapi.testclient import TestClient

from conftest import PASSWORD, bearer, register


class TestSettingsRead:
    def test_defaults_for_new_account(self, client: TestClient, tenant_a: str) -> None:
        response = client.get("/api/settings", headers=bearer(tenant_a))

        assert response.status_code == 200
        body = response.json()
        assert body["profile"]["name"] == "alice"
        assert body["profile"]["language"] == "ar"
        assert body["settings"]["notifications"]["email_notifications"] is True
        assert body["settings"]["system"]["maintenance_mode"] is False
        assert body["settings"]["updated_at"] is None


class TestSettingsUpdate:
    def test_notifications_are_upserted_per_owner(
        self, client: TestClient, tenant_a: str, tenant_b: str
    ) -> None:
        data = {"email_notifications": False, "payment_notifications": True}

        response = client.put(
            "/api/settings", json={"type": "notifications", "data": data}, headers=bearer(tenant_a)
        )

        assert response.status_code == 200
        own = client.get("/api/settings", headers=bearer(tenant_a)).json()["settings"]
        other = client.get("/api/settings", headers=bearer(tenant_b)).json()["settings"]
        assert own["notifications"] == data
        assert other["notifications"]["email_notifications"] is True

    def test_profile_update(self, client: TestClient, tenant_a: str) -> None:
        client.put(
            "/api/settings",
            json={"type": "profile", "data": {"name": "alice2", "phone": "0600", "timezone": "UTC"}},
            headers=bearer(tenant_a),
        )

        profile = client.get("/api/settings", headers=bearer(tenant_a)).json()["profile"]
        assert profile["name"] == "alice2"
        assert profile["phone"] == "0600"
        assert profile["timezone"] == "UTC"

    def test_profile_rename_to_taken_username_conflicts(
        self, client: TestClient, tenant_a: str
    ) -> None:
        register(client, "bob")

        response = client.put(
            "/api/settings",
            json={"type": "profile", "data": {"name": "bob"}},
            headers=bearer(tenant_a),
        )

        assert response.status_code == 409

    def test_unknown_type_is_400(self, client: TestClient, tenant_a: str) -> None:
        response = client.put(
            "/api/settings", json={"type": "colors", "data": {}}, headers=bearer(tenant_a)
        )

        assert response.status_code == 400


class TestPasswordChange:
    def test_wrong_current_password_keeps_stored_hash(
        self, client: TestClient, tenant_a: str
    ) -> None:
        response = client.put(
            "/api/settings",
            json={
                "type": "password",
                "data": {"current_password": "not-my-password", "new_password": "brand-new-pass"},
            },
            headers=bearer(tenant_a),
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Current password is incorrect"}
        old = client.post("/api/auth/login", json={"username": "alice", "password": PASSWORD})
        new = client.post("/api/auth/login", json={"username": "alice", "password": "brand-new-pass"})
        assert old.status_code == 200
        assert new.status_code == 401

    def test_correct_current_password_replaces_hash(
        self, client: TestClient, tenant_a: str
    ) -> None:
        response = client.put(
            "/api/settings",
            json={
                "type": "password",
                "data": {"current_password": PASSWORD, "new_password": "brand-new-pass"},
            },
            headers=bearer(tenant_a),
        )

        assert response.status_code == 200
        old = client.post("/api/auth/login", json={"username": "alice", "password": PASSWORD})
        new = client.post("/api/auth/login", json={"username": "alice", "password": "brand-new-pass"})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_missing_fields_are_400(self, client: TestClient, tenant_a: str) -> None:
        response = client.put(
            "/api/settings",
            json={"type": "password", "data": {"new_password": "brand-new-pass"}},
            headers=bearer(tenant_a),
        )

        assert response.status_code == 400


class TestSettingsPayloadValidation:
    def test_non_string_profile_name_is_400(self, client: TestClient, tenant_a: str) -> None:
        response = client.put(
            "/api/settings", json={"type": "profile", "data": {"name": 5}}, headers=bearer(tenant_a)
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("name:")

    def test_non_string_phone_is_rejected_and_not_stored(
        self, client: TestClient, tenant_a: str
    ) -> None:
        response = client.put(
            "/api/settings", json={"type": "profile", "data": {"phone": 600}}, headers=bearer(tenant_a)
        )

        assert response.status_code == 400
        profile = client.get("/api/settings", headers=bearer(tenant_a))
        assert profile.status_code == 200
        assert profile.json()["profile"]["phone"] == ""

    def test_non_string_current_password_is_400(self, client: TestClient, tenant_a: str) -> None:
        response = client.put(
            "/api/settings",
            json={"type": "password", "data": {"current_password": 123, "new_password": "brand-new-pass"}},
            headers=bearer(tenant_a),
        )

        assert response.status_code == 400
