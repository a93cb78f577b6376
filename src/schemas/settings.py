"""Settings schema definitions."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class ProfileInfo(BaseModel):
    name: str
    email: Optional[str] = None
    phone: str = ""
    language: str
    timezone: str
    avatar: Optional[str] = None
    created_at: str
    last_login: Optional[str] = None


class SettingsInfo(BaseModel):
    notifications: Dict[str, Any]
    system: Dict[str, Any]
    updated_at: Optional[str] = None


class SettingsResponse(BaseModel):
    profile: ProfileInfo
    settings: SettingsInfo


class UpdateSettingsRequest(BaseModel):
    type: Literal["profile", "password", "notifications", "system"] = Field(
        description="Which settings section `data` replaces."
    )
    data: Dict[str, Any]


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    avatar: Optional[str] = None


class PasswordUpdate(BaseModel):
    current_password: str
    new_password: str
