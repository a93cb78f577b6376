"""Settings routes.

Profile and password live on the caller's account; notification and system
preferences live in the caller's settings row.
"""

import logging

from fastapi import APIRouter
from pydantic import ValidationError as PydanticValidationError

from config import DEFAULT_LANGUAGE, DEFAULT_TIMEZONE
from core.dependencies import CurrentPrincipal, SettingsManagerDep, UserManagerDep
from core.exceptions import ValidationError
from schemas.settings import (
    PasswordUpdate,
    ProfileInfo,
    ProfileUpdate,
    SettingsInfo,
    SettingsResponse,
    UpdateSettingsRequest,
)
from utils.user_manager import UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/settings", tags=["Settings"])


def _parse(schema, data: dict):
    """Validate one section payload, reporting failures as a 400."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "Invalid value")
        raise ValidationError(f"{field}: {message}" if field else message) from e


@router.get("", response_model=SettingsResponse, summary="Get profile and settings")
def get_settings(
    principal: CurrentPrincipal,
    user_manager: UserManagerDep,
    settings_manager: SettingsManagerDep,
) -> SettingsResponse:
    """Return the caller's profile and settings, with defaults for unset sections."""
    user = user_manager.get_user_by_id(principal.subject_id)
    if user is None:
        raise UserNotFoundError()

    profile = ProfileInfo(
        name=user.username,
        email=user.email,
        phone=user.phone or "",
        language=user.language or DEFAULT_LANGUAGE,
        timezone=user.timezone or DEFAULT_TIMEZONE,
        avatar=user.avatar,
        created_at=user.created_at,
        last_login=user.last_login,
    )
    settings = SettingsInfo(**settings_manager.get_settings(principal.subject_id))
    return SettingsResponse(profile=profile, settings=settings)


@router.put("", summary="Update one settings section")
def update_settings(
    req: UpdateSettingsRequest,
    principal: CurrentPrincipal,
    user_manager: UserManagerDep,
    settings_manager: SettingsManagerDep,
) -> dict:
    """Update the section named by ``type`` with ``data``.

    - profile: name, email, phone, language, timezone, avatar
    - password: current_password, new_password
    - notifications / system: replaced as a whole
    """
    if req.type == "profile":
        profile = _parse(ProfileUpdate, req.data)
        changes = profile.model_dump(exclude_unset=True, exclude={"name"})
        if "name" in profile.model_fields_set:
            changes["username"] = profile.name
        user_manager.update_profile(principal.subject_id, changes)
    elif req.type == "password":
        passwords = _parse(PasswordUpdate, req.data)
        user_manager.change_password(
            principal.subject_id,
            passwords.current_password,
            passwords.new_password,
        )
    else:
        settings_manager.update_section(principal.subject_id, req.type, req.data)

    return {"message": "Settings updated successfully"}
