"""Access token issuing and verification.

Tokens are HS256 JWTs carrying the account id (``sub``) and its role.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pytz
from jose import JWTError, jwt
from pydantic import BaseModel

from config import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    JWT_ALGORITHM,
    JWT_SECRET_KEY,
    ROLES,
)

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    """Verified content of an access token."""

    subject_id: str
    role: str
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    subject_id: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token.

    Args:
        subject_id: Account id to encode as ``sub``.
        role: Account role, ``'admin'`` or ``'user'``.
        expires_delta: Optional override of the expiry window.

    Returns:
        Encoded JWT token string.
    """
    now = datetime.now(pytz.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": subject_id,
        "role": role,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: Optional[str]) -> Optional[TokenPayload]:
    """Verify a token and return its payload.

    Fails closed: a malformed, tampered or expired token, or one whose claims
    are incomplete, yields ``None``. Never raises.

    Args:
        token: Encoded JWT string.

    Returns:
        TokenPayload if the token is valid, None otherwise.
    """
    if not token or not isinstance(token, str):
        return None
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug("Rejected token: %s", e)
        return None

    subject_id = payload.get("sub")
    role = payload.get("role")
    if not isinstance(subject_id, str) or not subject_id or role not in ROLES:
        return None

    try:
        return TokenPayload(
            subject_id=subject_id,
            role=role,
            issued_at=datetime.fromtimestamp(int(payload["iat"]), pytz.utc),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), pytz.utc),
        )
    except (KeyError, TypeError, ValueError):
        return None
