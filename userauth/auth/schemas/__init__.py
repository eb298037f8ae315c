"""Authentication Pydantic schemas for API validation."""

from .auth import (
    CamelModel,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    StoredUser,
    SessionClaims,
    TokenData,
    LoginResponse,
)

__all__ = [
    "CamelModel",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "StoredUser",
    "SessionClaims",
    "TokenData",
    "LoginResponse",
]
