"""Report aggregation.

Pure functions over plain dict rows (one dict per student, teacher, subject or
subscription). Nothing here touches the database; callers fetch the owner's
rows and pass them in.
"""

from typing import Any, Dict, Iterable, List, Optional

from config import (
    ACTIVE_STATUSES,
    DEFAULT_SUBJECT_COMPLETION_RATE,
    DEFAULT_TEACHER_RATING,
    PAID_STATUSES,
    RECENT_STUDENTS_LIMIT,
    UNPAID_STATUSES,
    UNSPECIFIED_LABEL,
)

Row = Dict[str, Any]


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0 when the denominator is 0."""
    if not denominator:
        return 0.0
    return numerator / denominator


def _price(row: Row) -> float:
    return float(row.get("price") or 0)


def _label(value: Optional[str]) -> str:
    return value if value else UNSPECIFIED_LABEL


def total_revenue(subscriptions: Iterable[Row]) -> float:
    return float(sum(_price(sub) for sub in subscriptions))


def group_students_by_grade(students: Iterable[Row]) -> List[Row]:
    """Count students per grade with their active share in percent."""
    groups: Dict[str, Row] = {}
    for student in students:
        grade = _label(student.get("grade"))
        group = groups.setdefault(
            grade, {"total_students": 0, "active_students": 0, "inactive_students": 0}
        )
        group["total_students"] += 1
        if student.get("status") in ACTIVE_STATUSES:
            group["active_students"] += 1
        else:
            group["inactive_students"] += 1

    return [
        {
            "key": grade,
            "grade": grade,
            **group,
            "percentage": safe_divide(group["active_students"], group["total_students"]) * 100,
        }
        for grade, group in groups.items()
    ]


def _subscription_totals(subscriptions: Iterable[Row], field: str) -> Dict[str, Row]:
    """Revenue and distinct student names per value of ``field``."""
    totals: Dict[str, Row] = {}
    for sub in subscriptions:
        key = _label(sub.get(field))
        entry = totals.setdefault(key, {"revenue": 0.0, "students": set()})
        entry["revenue"] += _price(sub)
        if sub.get("student_name"):
            entry["students"].add(sub["student_name"])
    return totals


def group_by_teacher(teachers: Iterable[Row], subscriptions: List[Row]) -> List[Row]:
    """Per teacher of the owner: distinct subscribed students and revenue."""
    totals = _subscription_totals(subscriptions, "teacher")
    report: Dict[str, Row] = {}
    for teacher in teachers:
        name = teacher.get("name")
        if not name or name in report:
            continue
        entry = totals.get(name, {"revenue": 0.0, "students": set()})
        report[name] = {
            "teacher": name,
            "subject": _label(teacher.get("subject")),
            "students_count": len(entry["students"]),
            "revenue": entry["revenue"],
            "rating": DEFAULT_TEACHER_RATING,
        }
    return list(report.values())


def group_by_subject(subjects: Iterable[Row], subscriptions: List[Row]) -> List[Row]:
    """Per subject of the owner: distinct subscribed students and revenue."""
    totals = _subscription_totals(subscriptions, "subject")
    report: Dict[str, Row] = {}
    for subject in subjects:
        name = subject.get("name")
        if not name or name in report:
            continue
        entry = totals.get(name, {"revenue": 0.0, "students": set()})
        report[name] = {
            "subject": name,
            "students_count": len(entry["students"]),
            "revenue": entry["revenue"],
            "completion_rate": DEFAULT_SUBJECT_COMPLETION_RATE,
        }
    return list(report.values())


def build_reports(
    students: List[Row],
    teachers: List[Row],
    subjects: List[Row],
    subscriptions: List[Row],
) -> Row:
    """Assemble the grade, teacher and subject reports with a summary."""
    teacher_report = group_by_teacher(teachers, subscriptions)
    return {
        "student_report": group_students_by_grade(students),
        "teacher_report": teacher_report,
        "subject_report": group_by_subject(subjects, subscriptions),
        "summary": {
            "total_students": len(students),
            "total_revenue": total_revenue(subscriptions),
            "average_rating": safe_divide(
                sum(t["rating"] for t in teacher_report), len(teacher_report)
            ),
            "total_teachers": len(teachers),
            "total_subjects": len(subjects),
            "total_subscriptions": len(subscriptions),
        },
    }


def build_revenue(subscriptions: List[Row]) -> Row:
    """Revenue statistics, payment method and subject breakdowns, and table rows."""
    total = total_revenue(subscriptions)
    paid = total_revenue(s for s in subscriptions if s.get("payment_status") in PAID_STATUSES)
    pending = total_revenue(
        s for s in subscriptions if s.get("payment_status") in UNPAID_STATUSES
    )

    methods: Dict[str, Row] = {}
    for sub in subscriptions:
        entry = methods.setdefault(_label(sub.get("payment_method")), {"count": 0, "amount": 0.0})
        entry["count"] += 1
        entry["amount"] += _price(sub)

    payment_method_stats = [
        {
            "method": method,
            "count": entry["count"],
            "amount": entry["amount"],
            "percentage": safe_divide(entry["amount"], total) * 100,
        }
        for method, entry in methods.items()
    ]

    subject_stats = [
        {"subject": subject, "revenue": entry["revenue"], "students": len(entry["students"])}
        for subject, entry in _subscription_totals(subscriptions, "subject").items()
    ]

    revenue_data = [
        {
            "subscription_id": sub["subscription_id"],
            "date": (sub.get("created_at") or "")[:10],
            "student_name": _label(sub.get("student_name")),
            "subject": _label(sub.get("subject")),
            "amount": _price(sub),
            "payment_method": _label(sub.get("payment_method")),
            "status": _label(sub.get("payment_status")),
            "teacher": _label(sub.get("teacher")),
            "start_date": sub.get("start_date"),
            "end_date": sub.get("end_date"),
        }
        for sub in subscriptions
    ]

    return {
        "revenue_data": revenue_data,
        "statistics": {
            "total_revenue": total,
            "paid_revenue": paid,
            "pending_revenue": pending,
            "average_revenue": safe_divide(total, len(subscriptions)),
            "total_transactions": len(subscriptions),
        },
        "payment_method_stats": payment_method_stats,
        "subject_stats": subject_stats,
    }


def build_dashboard_stats(
    students: List[Row],
    teachers_count: int,
    subjects_count: int,
    subscriptions: List[Row],
    limit: int = RECENT_STUDENTS_LIMIT,
) -> Row:
    """Resource counts, total revenue and the most recently created students."""
    recent = sorted(students, key=lambda s: s.get("created_at") or "", reverse=True)
    return {
        "stats": {
            "total_students": len(students),
            "total_teachers": teachers_count,
            "total_subjects": subjects_count,
            "total_subscriptions": len(subscriptions),
            "total_revenue": total_revenue(subscriptions),
        },
        "recent_students": recent[:limit],
    }
