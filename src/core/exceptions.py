"""Custom exception classes for the back-office API.

Every error that may leave a request handler is one of these. The application
maps them to a JSON body ``{"error": message}`` with the class status code.
"""

from typing import Optional


class BackofficeError(Exception):
    """Base exception for all back-office errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        """Initialize the exception.

        Args:
            message: Caller-visible message. Falls back to the class default.
        """
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingTokenError(BackofficeError):
    """Raised when a protected request carries no credential at all."""

    status_code = 401
    default_message = "No authentication token provided"


class InvalidTokenError(BackofficeError):
    """Raised when a credential fails signature or expiry verification."""

    status_code = 401
    default_message = "Invalid or expired token"


class ForbiddenError(BackofficeError):
    """Raised when an authenticated caller lacks the required role."""

    status_code = 403
    default_message = "Forbidden"


class ValidationError(BackofficeError):
    """Raised when request data is missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(BackofficeError):
    """Raised when a unique name is already taken."""

    status_code = 409
    default_message = "Resource already exists"


class NotFoundOrAccessDeniedError(BackofficeError):
    """Raised when a record does not exist or belongs to another owner.

    The caller cannot tell the two cases apart.
    """

    status_code = 404

    def __init__(self, resource: str = "Resource"):
        """Initialize the exception.

        Args:
            resource: Human readable resource name, e.g. ``"Student"``.
        """
        self.resource = resource
        super().__init__(f"{resource} not found or access denied")


class InternalError(BackofficeError):
    """Raised for faults that must be reported without detail."""

    status_code = 500
    default_message = "Internal server error"


class InvalidCredentialsError(BackofficeError):
    """Raised when a login does not match an active account."""

    status_code = 401
    default_message = "Invalid username or password"
