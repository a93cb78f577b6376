"""Authentication routes.

This module handles HTTP endpoints for registration, login and token checks.
"""

import logging

from fastapi import APIRouter

from config import ADMIN_TOKEN
from core.dependencies import CurrentPrincipal, UserManagerDep
from core.exceptions import ForbiddenError, InternalError, InvalidCredentialsError
from core.security import create_access_token
from schemas.user import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from utils.user_manager import UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", summary="Register an account")
def register(req: RegisterRequest, user_manager: UserManagerDep) -> dict:
    """Register a new account.

    Registration requirements:
    - user: open registration
    - admin: requires ``admin_token`` matching the ADMIN_TOKEN environment variable

    Args:
        req: Registration request with username, password, email and role.
        user_manager: Injected UserManager instance.

    Returns:
        Dictionary with success message and the created account.
    """
    if req.role == "admin":
        if not ADMIN_TOKEN:
            logger.error("Admin registration attempted but ADMIN_TOKEN is not set")
            raise InternalError("Admin registration is not configured")
        if req.admin_token != ADMIN_TOKEN:
            logger.warning("Admin registration rejected for username %s", req.username)
            raise ForbiddenError("Invalid admin token")

    user = user_manager.create_user(
        username=req.username,
        password=req.password,
        role=req.role,
        email=req.email,
    )
    return {"message": "User created successfully", "user": user.to_public()}


@router.post("/login", response_model=LoginResponse, summary="Log in")
def login(req: LoginRequest, user_manager: UserManagerDep) -> LoginResponse:
    """Login with username and password.

    Args:
        req: Login request with username and password.
        user_manager: Injected UserManager instance.

    Returns:
        LoginResponse with account information and access token.

    Raises:
        InvalidCredentialsError: 401 if the credentials are wrong or the account is inactive.
    """
    user = user_manager.authenticate(req.username, req.password)
    if user is None:
        raise InvalidCredentialsError()

    user = user_manager.record_login(user.user_id)
    token = create_access_token(user.user_id, user.role)
    logger.info("User logged in: %s", user.username)
    return LoginResponse(user=user.to_public(), token=token)


@router.post("/verify", response_model=CurrentUserResponse, summary="Verify a token")
def verify(principal: CurrentPrincipal, user_manager: UserManagerDep) -> CurrentUserResponse:
    """Return the account behind a valid token.

    The token may come from the bearer header, the ``token`` query parameter
    or a ``{"token": ...}`` body.
    """
    user = user_manager.get_user_by_id(principal.subject_id)
    if user is None:
        raise UserNotFoundError()
    return CurrentUserResponse(user=user.to_public())


@router.get("/me", response_model=CurrentUserResponse, summary="Current account")
def get_current_user_info(
    principal: CurrentPrincipal, user_manager: UserManagerDep
) -> CurrentUserResponse:
    user = user_manager.get_user_by_id(principal.subject_id)
    if user is None:
        raise UserNotFoundError()
    return CurrentUserResponse(user=user.to_public())


@router.post("/logout", summary="Log out")
def logout() -> dict:
    """Logout endpoint.

    Tokens are stateless, so logout is handled client-side by discarding the
    token. This endpoint exists for API consistency.
    """
    return {"message": "Logged out successfully"}
