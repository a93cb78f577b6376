"""Configuration module for the tutoring-center back-office.

This module provides centralized configuration management, including directory
paths, API server settings, authentication parameters and the domain labels
used by reporting. All configuration values can be overridden via environment
variables.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR}/backoffice.db"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# CORS allowed origins (comma-separated list)
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:3000,http://127.0.0.1:3000,"
    "http://localhost:5173,http://127.0.0.1:5173",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Authentication Configuration ---

JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-in-production")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
    os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7))  # 7 days
)

# Bcrypt cost factor (higher = more secure but slower, minimum 4)
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

MIN_PASSWORD_LENGTH: int = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))

# Shared secret for admin self-registration (set via ADMIN_TOKEN environment variable)
ADMIN_TOKEN: Optional[str] = os.getenv("ADMIN_TOKEN")

ROLES: List[str] = ["admin", "user"]

# --- Domain Labels ---

# Status labels counted as "active" in the student report. The Arabic labels
# are what the existing front-end stores.
ACTIVE_STATUSES: List[str] = ["active", "نشط"]

PAID_STATUSES: List[str] = ["paid", "مدفوع"]
UNPAID_STATUSES: List[str] = ["unpaid", "غير مدفوع"]

# Placeholder used in reports when a grouping field is empty
UNSPECIFIED_LABEL: str = os.getenv("UNSPECIFIED_LABEL", "غير محدد")

# Reports have no rating or completion data yet, these are displayed instead
DEFAULT_TEACHER_RATING: float = float(os.getenv("DEFAULT_TEACHER_RATING", "4.5"))
DEFAULT_SUBJECT_COMPLETION_RATE: float = float(
    os.getenv("DEFAULT_SUBJECT_COMPLETION_RATE", "75")
)

RECENT_STUDENTS_LIMIT: int = 5

# --- Settings Defaults ---

DEFAULT_LANGUAGE: str = "ar"
DEFAULT_TIMEZONE: str = "Asia/Riyadh"

DEFAULT_NOTIFICATION_SETTINGS: Dict[str, Any] = {
    "email_notifications": True,
    "new_student_notifications": True,
    "payment_notifications": True,
    "maintenance_reminders": True,
    "system_updates": True,
}

DEFAULT_SYSTEM_SETTINGS: Dict[str, Any] = {
    "system_name": "نظام الدراسة",
    "system_description": "نظام إدارة الدراسة والتعليم",
    "maintenance_mode": False,
    "auto_login": True,
    "currency": "دم",
    "date_format": "DD/MM/YYYY",
}
