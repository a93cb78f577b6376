"""User management utilities.

This module provides account management including storage, bcrypt password
hashing, authentication and the admin account operations.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import BCRYPT_ROUNDS, MIN_PASSWORD_LENGTH, ROLES
from core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundOrAccessDeniedError,
    ValidationError,
)
from models.user import UserModel
from schemas.user import User
from utils.tenant_scope import utc_now_iso

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class UserNotFoundError(NotFoundOrAccessDeniedError):
    """Exception raised when a user is not found."""

    def __init__(self):
        super().__init__("User")


class UserAlreadyExistsError(ConflictError):
    """Exception raised when trying to create a user that already exists."""

    default_message = "Username already exists"


def _password_bytes(password: str) -> bytes:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
    return password_bytes


def model_to_user(model: UserModel) -> User:
    return User.model_validate(model)


class UserManager:
    """Manages account persistence and operations using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize UserManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    # --- Passwords ---

    def validate_password(self, password: Optional[str]) -> None:
        """Reject empty or short passwords.

        Raises:
            ValidationError: If the password is shorter than MIN_PASSWORD_LENGTH.
        """
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash.

        Args:
            plain_password: Plain text password to verify.
            hashed_password: Bcrypt hash string to verify against.

        Returns:
            True if password matches, False otherwise.
        """
        if not plain_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password), hashed_password.encode("utf-8")
            )
        except ValueError as e:
            logger.error("Password verification error: %s", e)
            return False

    # --- Lookups ---

    def _get_model(self, user_id: str) -> UserModel:
        model = self.db.query(UserModel).filter(UserModel.user_id == user_id).first()
        if model is None:
            raise UserNotFoundError()
        return model

    def _username_taken(self, username: str, exclude_user_id: Optional[str] = None) -> bool:
        query = self.db.query(UserModel).filter(UserModel.username == username)
        if exclude_user_id:
            query = query.filter(UserModel.user_id != exclude_user_id)
        return query.first() is not None

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by username.

        Args:
            username: Username to look up.

        Returns:
            User object if found, None otherwise.
        """
        model = self.db.query(UserModel).filter(UserModel.username == username).first()
        if model:
            return model_to_user(model)
        return None

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by user ID.

        Args:
            user_id: User ID to look up.

        Returns:
            User object if found, None otherwise.
        """
        model = self.db.query(UserModel).filter(UserModel.user_id == user_id).first()
        if model:
            return model_to_user(model)
        return None

    def list_users(self, exclude_user_id: Optional[str] = None) -> List[User]:
        """List accounts, optionally leaving one out.

        Args:
            exclude_user_id: Account to omit, typically the caller.

        Returns:
            List of User objects, newest first.
        """
        query = self.db.query(UserModel)
        if exclude_user_id:
            query = query.filter(UserModel.user_id != exclude_user_id)
        models = query.order_by(UserModel.created_at.desc()).all()
        return [model_to_user(m) for m in models]

    # --- Mutations ---

    def create_user(
        self,
        username: str,
        password: str,
        role: str = "user",
        email: Optional[str] = None,
        is_active: bool = True,
    ) -> User:
        """Create a new account.

        Args:
            username: Username for the new account.
            password: Plain text password.
            role: Account role ('admin' or 'user').
            email: Optional email address.
            is_active: Whether the account may log in.

        Returns:
            Created User object.

        Raises:
            ValidationError: If username, password or role is invalid.
            UserAlreadyExistsError: If username already exists.
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required")
        self.validate_password(password)
        if role not in ROLES:
            raise ValidationError(f"Invalid role: {role}. Must be one of: {', '.join(ROLES)}")

        if self._username_taken(username):
            raise UserAlreadyExistsError()

        now = utc_now_iso()
        model = UserModel(
            user_id=str(uuid.uuid4()),
            username=username,
            password_hash=self.hash_password(password),
            email=email,
            role=role,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )

        # Two concurrent requests may both pass the check above; the unique
        # constraint catches the second one.
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError() from e

        logger.info("Created user: %s (role=%s)", username, role)
        return model_to_user(model)

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the active account matching the credentials, or None."""
        model = (
            self.db.query(UserModel)
            .filter(UserModel.username == username, UserModel.is_active.is_(True))
            .first()
        )
        if model is None or not self.verify_password(password, model.password_hash):
            return None
        return model_to_user(model)

    def record_login(self, user_id: str) -> User:
        model = self._get_model(user_id)
        model.last_login = utc_now_iso()
        self.db.commit()
        self.db.refresh(model)
        return model_to_user(model)

    def update_user(self, user_id: str, changes: Dict[str, Any]) -> User:
        """Apply an admin update to any account.

        Args:
            user_id: Account to update.
            changes: Subset of username, email, role, is_active, password.

        Returns:
            Updated User object.

        Raises:
            UserNotFoundError: If the account does not exist.
            UserAlreadyExistsError: If the new username belongs to another account.
            ValidationError: If the role or password is invalid.
        """
        model = self._get_model(user_id)

        username = changes.get("username")
        if username is not None:
            username = username.strip()
            if not username:
                raise ValidationError("Username cannot be empty")
            if self._username_taken(username, exclude_user_id=user_id):
                raise UserAlreadyExistsError()
            model.username = username

        if "email" in changes:
            model.email = changes["email"]

        role = changes.get("role")
        if role is not None:
            if role not in ROLES:
                raise ValidationError(f"Invalid role: {role}. Must be one of: {', '.join(ROLES)}")
            model.role = role

        if changes.get("is_active") is not None:
            model.is_active = changes["is_active"]

        # Only update password if provided
        if changes.get("password"):
            self.validate_password(changes["password"])
            model.password_hash = self.hash_password(changes["password"])

        model.updated_at = utc_now_iso()
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError() from e
        self.db.refresh(model)
        logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(changes)))
        return model_to_user(model)

    def delete_user(self, user_id: str, acting_user_id: str) -> None:
        """Delete an account on behalf of an admin.

        Args:
            user_id: Account to delete.
            acting_user_id: Account id of the admin performing the deletion.

        Raises:
            ForbiddenError: If the admin targets their own account.
            UserNotFoundError: If the account does not exist.
        """
        if user_id == acting_user_id:
            raise ForbiddenError("Cannot delete your own account")
        model = self._get_model(user_id)
        self.db.delete(model)
        self.db.commit()
        logger.info("Deleted user %s (by %s)", user_id, acting_user_id)

    def update_profile(self, user_id: str, changes: Dict[str, Any]) -> User:
        """Update the caller's own profile fields.

        Empty values for username and email are ignored, like the settings
        form sends them.
        """
        model = self._get_model(user_id)
        username = changes.get("username")
        if username and username.strip() != model.username:
            username = username.strip()
            if self._username_taken(username, exclude_user_id=user_id):
                raise UserAlreadyExistsError()
            model.username = username
        if changes.get("email"):
            model.email = changes["email"]
        for field in ("phone", "avatar"):
            if field in changes:
                setattr(model, field, changes[field])
        for field in ("language", "timezone"):
            if changes.get(field):
                setattr(model, field, changes[field])

        model.updated_at = utc_now_iso()
        self.db.commit()
        self.db.refresh(model)
        logger.info("Updated profile for user %s", user_id)
        return model_to_user(model)

    def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """Replace the password after verifying the current one.

        Raises:
            ValidationError: If either password is missing, the current one is
                wrong or the new one is too short. The stored hash is left
                unchanged in every failure case.
        """
        if not current_password or not new_password:
            raise ValidationError("Current password and new password are required")
        model = self._get_model(user_id)
        if not self.verify_password(current_password, model.password_hash):
            raise ValidationError("Current password is incorrect")
        self.validate_password(new_password)

        model.password_hash = self.hash_password(new_password)
        model.updated_at = utc_now_iso()
        self.db.commit()
        logger.info("Updated password for user %s", user_id)
