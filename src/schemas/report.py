"""Report and dashboard response schemas."""

from typing import List, Optional

from pydantic import BaseModel


class GradeReportRow(BaseModel):
    key: str
    grade: str
    total_students: int
    active_students: int
    inactive_students: int
    percentage: float


class TeacherReportRow(BaseModel):
    teacher: str
    subject: str
    students_count: int
    revenue: float
    rating: float


class SubjectReportRow(BaseModel):
    subject: str
    students_count: int
    revenue: float
    completion_rate: float


class ReportSummary(BaseModel):
    total_students: int
    total_revenue: float
    average_rating: float
    total_teachers: int
    total_subjects: int
    total_subscriptions: int


class ReportsResponse(BaseModel):
    student_report: List[GradeReportRow]
    teacher_report: List[TeacherReportRow]
    subject_report: List[SubjectReportRow]
    summary: ReportSummary


class RevenueRow(BaseModel):
    subscription_id: str
    date: str
    student_name: str
    subject: str
    amount: float
    payment_method: str
    status: str
    teacher: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class RevenueStatistics(BaseModel):
    total_revenue: float
    paid_revenue: float
    pending_revenue: float
    average_revenue: float
    total_transactions: int


class PaymentMethodStat(BaseModel):
    method: str
    count: int
    amount: float
    percentage: float


class SubjectRevenueStat(BaseModel):
    subject: str
    revenue: float
    students: int


class RevenueResponse(BaseModel):
    revenue_data: List[RevenueRow]
    statistics: RevenueStatistics
    payment_method_stats: List[PaymentMethodStat]
    subject_stats: List[SubjectRevenueStat]


class DashboardStats(BaseModel):
    total_students: int
    total_teachers: int
    total_subjects: int
    total_subscriptions: int
    total_revenue: float
