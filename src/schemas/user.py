"""Account schema definitions."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountInfo(BaseModel):
    """Account as returned to callers. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    email: Optional[str] = None
    role: str
    is_active: bool = True
    phone: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    avatar: Optional[str] = None
    last_login: Optional[str] = None
    created_at: str
    updated_at: str


class User(AccountInfo):
    """Stored account including its bcrypt hash."""

    password_hash: str

    def to_public(self) -> AccountInfo:
        return AccountInfo.model_validate(self.model_dump(exclude={"password_hash"}))


class RegisterRequest(BaseModel):
    username: str = Field(description="Unique login name.")
    password: str
    email: Optional[str] = None
    role: str = Field(default="user", description="'admin' or 'user'.")
    admin_token: Optional[str] = Field(
        default=None,
        description="Required when registering an admin; must match ADMIN_TOKEN.",
    )


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    user: AccountInfo
    token: str


class CurrentUserResponse(BaseModel):
    user: AccountInfo


class CreateAccountRequest(BaseModel):
    username: str
    password: str
    email: Optional[str] = None
    role: str = "user"
    is_active: bool = True


class UpdateAccountRequest(BaseModel):
    """Partial account update. Omitted fields are left unchanged."""

    username: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None
    password: Optional[str] = None
