"""Authentication module for userauth.

This module provides the credential-management core:
- Schema validation for auth payloads
- Password hashing and verification (bcrypt)
- Registration and login orchestration (AuthService)
- JWT session token signing

Auth endpoints:
- POST /auth/register - Create an account
- POST /auth/login - Authenticate and return a signed token
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
