"""Exception hierarchy for userauth.

Errors fall into two groups:

- Classified errors (subclasses of ``ClassifiedError``) carry a caller-facing
  HTTP status and a short, fixed message. They travel unchanged from where
  they are raised to the HTTP boundary.
- Everything else is unclassified: store outages, programming errors and
  other unexpected exceptions. Those are logged and replaced with a generic
  server error before they reach a caller.
"""


class UserAuthError(Exception):
    """Base exception for all userauth errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ClassifiedError(UserAuthError):
    """Error with a pre-assigned status code and message."""

    status_code: int = 500
    default_message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, details: dict | None = None):
        super().__init__(message or self.default_message, details)


# ============================================================================
# Domain errors (client-facing)
# ============================================================================


class DuplicateAccount(ClassifiedError):
    """An active account already uses this email."""

    status_code = 400
    default_message = "User already exists"


class UserNotFound(ClassifiedError):
    """No active account matches the login email."""

    status_code = 404
    default_message = "User not found"


class InvalidCredentials(ClassifiedError):
    """Password does not match the stored hash."""

    status_code = 400
    default_message = "Invalid password"


# ============================================================================
# Server errors (mask unclassified failures)
# ============================================================================


class RegistrationFailed(ClassifiedError):
    status_code = 500
    default_message = "Failed to register user"


class LoginFailed(ClassifiedError):
    status_code = 500
    default_message = "Failed to login"


# ============================================================================
# Boundary errors
# ============================================================================


class ValidationError(ClassifiedError):
    """Request payload failed schema validation."""

    status_code = 400
    default_message = "Invalid request data"


class ResourceNotFound(ClassifiedError):
    """Requested record does not exist."""

    status_code = 404
    default_message = "Resource not found"
