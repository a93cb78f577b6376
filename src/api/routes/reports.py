"""Reporting routes: reports, revenue and dashboard statistics.

All three read the caller's rows in full and aggregate them in memory.
"""

from fastapi import APIRouter

from core.dependencies import (
    CurrentPrincipal,
    StudentManagerDep,
    SubjectManagerDep,
    SubscriptionManagerDep,
    TeacherManagerDep,
)
from schemas.report import DashboardStats, ReportsResponse, RevenueResponse
from schemas.student import Student
from schemas.subject import Subject
from schemas.subscription import Subscription
from schemas.teacher import Teacher
from utils import reporting

router = APIRouter(prefix="/api", tags=["Reports"])


def _rows(models, schema):
    return [schema.model_validate(m).model_dump() for m in models]


@router.get("/reports", response_model=ReportsResponse, summary="Grade, teacher and subject reports")
def get_reports(
    principal: CurrentPrincipal,
    students: StudentManagerDep,
    teachers: TeacherManagerDep,
    subjects: SubjectManagerDep,
    subscriptions: SubscriptionManagerDep,
) -> ReportsResponse:
    owner_id = principal.subject_id
    report = reporting.build_reports(
        students=_rows(students.list_for_owner(owner_id), Student),
        teachers=_rows(teachers.list_for_owner(owner_id), Teacher),
        subjects=_rows(subjects.list_for_owner(owner_id), Subject),
        subscriptions=_rows(subscriptions.list_for_owner(owner_id), Subscription),
    )
    return ReportsResponse(**report)


@router.get("/revenue", response_model=RevenueResponse, summary="Revenue statistics")
def get_revenue(
    principal: CurrentPrincipal,
    subscriptions: SubscriptionManagerDep,
) -> RevenueResponse:
    rows = _rows(subscriptions.list_for_owner(principal.subject_id), Subscription)
    return RevenueResponse(**reporting.build_revenue(rows))


@router.api_route(
    "/dashboard/stats",
    methods=["GET", "POST"],
    summary="Dashboard counters and recent students",
)
def get_dashboard_stats(
    principal: CurrentPrincipal,
    students: StudentManagerDep,
    teachers: TeacherManagerDep,
    subjects: SubjectManagerDep,
    subscriptions: SubscriptionManagerDep,
) -> dict:
    """Counters for the dashboard.

    Accepts POST with ``{"token": ...}`` as well as GET.
    """
    owner_id = principal.subject_id
    result = reporting.build_dashboard_stats(
        students=_rows(students.list_for_owner(owner_id), Student),
        teachers_count=teachers.count_for_owner(owner_id),
        subjects_count=subjects.count_for_owner(owner_id),
        subscriptions=_rows(subscriptions.list_for_owner(owner_id), Subscription),
    )
    return {
        "stats": DashboardStats(**result["stats"]),
        "recent_students": result["recent_students"],
    }
