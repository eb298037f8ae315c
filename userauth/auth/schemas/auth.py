"""Pydantic schemas for registration, login and session tokens.

External JSON uses camelCase field names (birthDate, deletedAt, createdAt);
Python code uses snake_case. Models accept either on input.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting both spellings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_email(value: str) -> str:
    _name, email = validate_email(value)
    return email


# ============================================================================
# Request Schemas
# ============================================================================


class LoginRequest(CamelModel):
    """Credentials submitted to POST /auth/login."""

    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, max_length=60, description="Plain text password")

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        return _check_email(v)


class RegisterRequest(LoginRequest):
    """
    Account data submitted to POST /auth/register.

    Example:
    ```json
    {
        "email": "a@b.com",
        "password": "pw",
        "name": "A",
        "birthDate": "1990-01-01"
    }
    ```
    """

    name: str = Field(..., min_length=1, max_length=85, description="Display name")
    birth_date: date = Field(..., description="ISO 8601 calendar date (YYYY-MM-DD)")

    @field_validator("birth_date", mode="before")
    @classmethod
    def birth_date_is_iso_string(cls, v):
        # Numbers would otherwise be read as Unix timestamps
        if isinstance(v, datetime) or not isinstance(v, (str, date)):
            raise ValueError("birthDate must be an ISO 8601 date string (YYYY-MM-DD)")
        return v


# ============================================================================
# User Schemas
# ============================================================================


class UserResponse(CamelModel):
    """User record as exposed outside the service (no password hash)."""

    id: str
    email: str
    name: str
    birth_date: date
    created_at: datetime
    deleted_at: datetime | None = None


class StoredUser(UserResponse):
    """Full user record as held by the credential store, including the hash."""

    password: str = Field(..., description="bcrypt hash")

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def to_response(self) -> UserResponse:
        """Drop the password hash for external exposure."""
        return UserResponse.model_validate(self.model_dump(exclude={"password"}))


# ============================================================================
# Token Schemas
# ============================================================================


class SessionClaims(BaseModel):
    """Claims embedded in a session token. Built at login, never stored."""

    email: str
    name: str
    age: int


class TokenData(BaseModel):
    token: str


class LoginResponse(BaseModel):
    """Successful login body: {"data": {"token": "..."}}."""

    data: TokenData
