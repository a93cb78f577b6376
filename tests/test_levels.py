"""Tests for level name uniqueness and the student reference guard."""

from fastapi.testclient import TestClient

from conftest import bearer


def _level(client: TestClient, token: str, name: str, order: int = 0) -> dict:
    response = client.post("/api/levels", json={"name": name, "order": order}, headers=bearer(token))
    assert response.status_code == 200, response.text
    return response.json()["level"]


def _student(client: TestClient, token: str, grade: str) -> dict:
    response = client.post(
        "/api/students", json={"name": "Sara", "grade": grade}, headers=bearer(token)
    )
    assert response.status_code == 200, response.text
    return response.json()["student"]


class TestLevelNames:
    def test_duplicate_name_for_same_owner_conflicts(self, client: TestClient, tenant_a: str) -> None:
        _level(client, tenant_a, "Level 1")

        response = client.post("/api/levels", json={"name": "Level 1"}, headers=bearer(tenant_a))

        assert response.status_code == 409
        assert response.json() == {"error": "Level name already exists"}

    def test_same_name_for_different_owners(
        self, client: TestClient, tenant_a: str, tenant_b: str
    ) -> None:
        _level(client, tenant_a, "Level 1")

        assert _level(client, tenant_b, "Level 1")["name"] == "Level 1"

    def test_rename_excludes_self_from_conflict_check(
        self, client: TestClient, tenant_a: str
    ) -> None:
        level = _level(client, tenant_a, "Level 1")
        _level(client, tenant_a, "Level 2")

        same = client.put(
            f"/api/levels/{level['level_id']}",
            json={"name": "Level 1", "description": "first"},
            headers=bearer(tenant_a),
        )
        taken = client.put(
            f"/api/levels/{level['level_id']}", json={"name": "Level 2"}, headers=bearer(tenant_a)
        )

        assert same.status_code == 200
        assert same.json()["level"]["description"] == "first"
        assert taken.status_code == 409

    def test_list_is_ordered(self, client: TestClient, tenant_a: str) -> None:
        _level(client, tenant_a, "Third", order=3)
        _level(client, tenant_a, "First", order=1)
        _level(client, tenant_a, "Second", order=2)

        levels = client.get("/api/levels", headers=bearer(tenant_a)).json()["levels"]

        assert [lv["name"] for lv in levels] == ["First", "Second", "Third"]


class TestLevelDeleteGuard:
    def test_delete_blocked_while_student_uses_level(
        self, client: TestClient, tenant_a: str
    ) -> None:
        level = _level(client, tenant_a, "Level 1")
        _student(client, tenant_a, "Level 1")

        response = client.delete(f"/api/levels/{level['level_id']}", headers=bearer(tenant_a))

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot delete level that is being used by students"}
        assert len(client.get("/api/levels", headers=bearer(tenant_a)).json()["levels"]) == 1

    def test_delete_allowed_once_no_student_uses_level(
        self, client: TestClient, tenant_a: str
    ) -> None:
        level = _level(client, tenant_a, "Level 1")
        student = _student(client, tenant_a, "Level 1")
        client.put(
            f"/api/students/{student['student_id']}",
            json={"grade": "Level 2"},
            headers=bearer(tenant_a),
        )

        response = client.delete(f"/api/levels/{level['level_id']}", headers=bearer(tenant_a))

        assert response.status_code == 200

    def test_other_tenants_students_do_not_block(
        self, client: TestClient, tenant_a: str, tenant_b: str
    ) -> None:
        level = _level(client, tenant_a, "Level 1")
        _student(client, tenant_b, "Level 1")

        response = client.delete(f"/api/levels/{level['level_id']}", headers=bearer(tenant_a))

        assert response.status_code == 200


class TestLevelUpdates:
    def test_null_for_required_column_is_400(self, client: TestClient, tenant_a: str) -> None:
        level = _level(client, tenant_a, "Level 1", order=3)

        response = client.put(
            f"/api/levels/{level['level_id']}", json={"order": None}, headers=bearer(tenant_a)
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Level order cannot be null"}
        levels = client.get("/api/levels", headers=bearer(tenant_a)).json()["levels"]
        assert levels[0]["order"] == 3
