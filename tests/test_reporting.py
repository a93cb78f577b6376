"""Tests for report aggregation and the reporting endpoints."""

import pytest
from fastapi.testclient import TestClient

from conftest import bearer
from utils import reporting


def _sub(student: str, subject: str, teacher: str, price: float, **extra) -> dict:
    return {
        "subscription_id": f"{student}-{subject}",
        "student_name": student,
        "subject": subject,
        "teacher": teacher,
        "price": price,
        "created_at": "2026-01-15T10:00:00+00:00",
        **extra,
    }


class TestEmptyInputs:
    def test_reports_on_empty_sets(self) -> None:
        report = reporting.build_reports([], [], [], [])

        assert report["student_report"] == []
        assert report["summary"]["total_revenue"] == 0
        assert report["summary"]["average_rating"] == 0

    def test_revenue_on_empty_set(self) -> None:
        revenue = reporting.build_revenue([])

        assert revenue["statistics"] == {
            "total_revenue": 0,
            "paid_revenue": 0,
            "pending_revenue": 0,
            "average_revenue": 0,
            "total_transactions": 0,
        }
        assert revenue["payment_method_stats"] == []

    def test_zero_revenue_percentages(self) -> None:
        revenue = reporting.build_revenue([_sub("Sara", "Math", "Omar", 0, payment_method="cash")])

        assert revenue["payment_method_stats"][0]["percentage"] == 0


class TestGrouping:
    def test_students_grouped_by_grade(self) -> None:
        students = [
            {"grade": "Level 1", "status": "active"},
            {"grade": "Level 1", "status": "نشط"},
            {"grade": "Level 1", "status": "inactive"},
            {"grade": "Level 2", "status": "inactive"},
            {"grade": None, "status": "active"},
        ]

        rows = {row["grade"]: row for row in reporting.group_students_by_grade(students)}

        assert rows["Level 1"]["total_students"] == 3
        assert rows["Level 1"]["active_students"] == 2
        assert rows["Level 1"]["percentage"] == pytest.approx(200 / 3)
        assert rows["Level 2"]["percentage"] == 0
        assert rows[reporting.UNSPECIFIED_LABEL]["active_students"] == 1

    def test_teacher_and_subject_revenue_with_distinct_students(self) -> None:
        subscriptions = [
            _sub("Sara", "Math", "Omar", 100),
            _sub("Sara", "Physics", "Omar", 50),
            _sub("Ali", "Math", "Omar", 100),
            _sub("Ali", "Math", "Layla", 80),
        ]
        teachers = [{"name": "Omar", "subject": "Math"}, {"name": "Layla"}, {"name": "Idle"}]
        subjects = [{"name": "Math"}, {"name": "Physics"}]

        report = reporting.build_reports([], teachers, subjects, subscriptions)

        by_teacher = {row["teacher"]: row for row in report["teacher_report"]}
        assert by_teacher["Omar"]["revenue"] == 250
        assert by_teacher["Omar"]["students_count"] == 2
        assert by_teacher["Layla"]["subject"] == reporting.UNSPECIFIED_LABEL
        assert by_teacher["Idle"]["revenue"] == 0
        by_subject = {row["subject"]: row for row in report["subject_report"]}
        assert by_subject["Math"]["revenue"] == 280
        assert by_subject["Math"]["students_count"] == 2
        assert report["summary"]["total_revenue"] == 330

    def test_revenue_statistics(self) -> None:
        subscriptions = [
            _sub("Sara", "Math", "Omar", 100, payment_status="paid", payment_method="cash"),
            _sub("Ali", "Math", "Omar", 60, payment_status="غير مدفوع", payment_method="card"),
            _sub("Mona", "Art", "Omar", 40, payment_status="paid", payment_method="cash"),
        ]

        revenue = reporting.build_revenue(subscriptions)

        stats = revenue["statistics"]
        assert stats["total_revenue"] == 200
        assert stats["paid_revenue"] == 140
        assert stats["pending_revenue"] == 60
        assert round(stats["average_revenue"], 2) == 66.67
        methods = {row["method"]: row for row in revenue["payment_method_stats"]}
        assert methods["cash"]["count"] == 2
        assert methods["cash"]["percentage"] == pytest.approx(70)
        assert revenue["revenue_data"][0]["date"] == "2026-01-15"

    def test_dashboard_recent_students(self) -> None:
        students = [{"name": f"s{i}", "created_at": f"2026-01-0{i}"} for i in range(1, 8)]

        result = reporting.build_dashboard_stats(students, 2, 3, [], limit=5)

        assert result["stats"]["total_students"] == 7
        assert [s["name"] for s in result["recent_students"]] == ["s7", "s6", "s5", "s4", "s3"]


class TestReportingEndpoints:
    def test_reports_are_scoped_to_caller(
        self, client: TestClient, tenant_a: str, tenant_b: str
    ) -> None:
        client.post(
            "/api/subscriptions",
            json={"student_name": "Sara", "subject": "Math", "price": 120},
            headers=bearer(tenant_a),
        )

        own = client.get("/api/revenue", headers=bearer(tenant_a)).json()
        other = client.get("/api/revenue", headers=bearer(tenant_b)).json()

        assert own["statistics"]["total_revenue"] == 120
        assert other["statistics"]["total_revenue"] == 0
        assert other["statistics"]["average_revenue"] == 0

    def test_reports_endpoint(self, client: TestClient, tenant_a: str) -> None:
        client.post("/api/teachers", json={"name": "Omar"}, headers=bearer(tenant_a))

        response = client.get("/api/reports", headers=bearer(tenant_a))

        assert response.status_code == 200
        assert response.json()["summary"]["total_teachers"] == 1

    def test_dashboard_stats_accepts_token_in_body(self, client: TestClient, tenant_a: str) -> None:
        client.post("/api/students", json={"name": "Sara"}, headers=bearer(tenant_a))

        response = client.post("/api/dashboard/stats", json={"token": tenant_a})

        assert response.status_code == 200
        body = response.json()
        assert body["stats"]["total_students"] == 1
        assert body["recent_students"][0]["name"] == "Sara"
