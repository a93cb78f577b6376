"""Dependency injection module for FastAPI.

This module provides the request-scoped managers and the access gate used by
every protected route: token extraction, verification and role checks.
"""

import json
from typing import Annotated, Any, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import ForbiddenError, InvalidTokenError, MissingTokenError
from core.security import decode_access_token
from utils import resource_managers
from utils import settings_manager
from utils import user_manager

# auto_error is off: a missing header is not an error while the query string
# or the body may still carry the token.
bearer_scheme = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    """The authenticated caller of a request."""

    subject_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


# --- Access gate ---


async def _token_from_body(request: Request) -> Optional[str]:
    body = await request.body()
    if not body:
        return None
    try:
        data: Any = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    if isinstance(data, dict) and isinstance(data.get("token"), str):
        return data["token"]
    return None


async def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
) -> Optional[str]:
    """Find the caller's token.

    Precedence: ``Authorization: Bearer`` header, ``token`` query parameter,
    ``token`` field of a JSON body.

    Args:
        request: Incoming request.
        credentials: Parsed bearer header, if any.

    Returns:
        The token string, or None when no location carries one.
    """
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    query_token = request.query_params.get("token")
    if query_token:
        return query_token
    return await _token_from_body(request)


def authorize(token: Optional[str], require_role: Optional[str] = None) -> Principal:
    """Verify a token and optionally require a role.

    Args:
        token: Raw token string or None.
        require_role: Role the caller must hold, e.g. ``'admin'``.

    Returns:
        Principal of the caller.

    Raises:
        MissingTokenError: If no token was supplied.
        InvalidTokenError: If the token is tampered, expired or malformed.
        ForbiddenError: If ``require_role`` is set and the token role differs.
    """
    if not token:
        raise MissingTokenError()
    payload = decode_access_token(token)
    if payload is None:
        raise InvalidTokenError()
    if require_role is not None and payload.role != require_role:
        raise ForbiddenError(f"Unauthorized - {require_role.capitalize()} access required")
    return Principal(subject_id=payload.subject_id, role=payload.role)


async def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Authenticate the caller of any protected route."""
    token = await extract_token(request, credentials)
    return authorize(token)


async def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Authenticate the caller and require the admin role."""
    token = await extract_token(request, credentials)
    return authorize(token, require_role="admin")


# --- Managers ---


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(db)


def get_settings_manager(db: Session = Depends(get_db)) -> settings_manager.SettingsManager:
    """Get SettingsManager instance with request-scoped DB session."""
    return settings_manager.SettingsManager(db)


def get_student_manager(db: Session = Depends(get_db)) -> resource_managers.StudentManager:
    return resource_managers.StudentManager(db)


def get_teacher_manager(db: Session = Depends(get_db)) -> resource_managers.TeacherManager:
    return resource_managers.TeacherManager(db)


def get_subject_manager(db: Session = Depends(get_db)) -> resource_managers.SubjectManager:
    return resource_managers.SubjectManager(db)


def get_level_manager(db: Session = Depends(get_db)) -> resource_managers.LevelManager:
    return resource_managers.LevelManager(db)


def get_subscription_manager(
    db: Session = Depends(get_db),
) -> resource_managers.SubscriptionManager:
    return resource_managers.SubscriptionManager(db)


# Type aliases for dependency injection
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
AdminPrincipal = Annotated[Principal, Depends(require_admin)]

UserManagerDep = Annotated[
    user_manager.UserManager, Depends(get_user_manager)
]
SettingsManagerDep = Annotated[
    settings_manager.SettingsManager, Depends(get_settings_manager)
]
StudentManagerDep = Annotated[
    resource_managers.StudentManager, Depends(get_student_manager)
]
TeacherManagerDep = Annotated[
    resource_managers.TeacherManager, Depends(get_teacher_manager)
]
SubjectManagerDep = Annotated[
    resource_managers.SubjectManager, Depends(get_subject_manager)
]
LevelManagerDep = Annotated[
    resource_managers.LevelManager, Depends(get_level_manager)
]
SubscriptionManagerDep = Annotated[
    resource_managers.SubscriptionManager, Depends(get_subscription_manager)
]
