"""Authentication API endpoints for userauth.

These endpoints expose registration and login as JSON:
- POST /auth/register - Create an account
- POST /auth/login - Authenticate and return a signed session token

Payloads are validated by @validate_request before reaching the service.
Every request opens its own atomic database Core and builds an AuthService
around it; failures raised by the service are ClassifiedError subclasses
rendered by the error handlers in main.py.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import Core, get_core
from ..exceptions import RegistrationFailed
from . import token
from .schemas import LoginRequest, LoginResponse, RegisterRequest
from .service import AuthService, classify_failure

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


def _auth_service(core: Core) -> AuthService:
    return AuthService(core.user, token.default_signer(), logger=logger)


@auth_bp.route("/auth/register", methods=["POST"])
@validate_request
def register(data: RegisterRequest):
    """
    Create a new account.

    Returns:
        201 with the created user (password hash omitted)

    Error Responses:
        400: ValidationError (bad payload) or DuplicateAccount
        500: RegistrationFailed

    Example request:
    ```json
    {
        "email": "a@b.com",
        "password": "pw",
        "name": "A",
        "birthDate": "1990-01-01"
    }
    ```

    Example response:
    ```json
    {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "email": "a@b.com",
        "name": "A",
        "birthDate": "1990-01-01",
        "createdAt": "2026-10-18T10:30:00Z",
        "deletedAt": null
    }
    ```
    """
    try:
        with get_core(atomic=True) as core:
            user = _auth_service(core).register(
                email=data.email,
                password=data.password,
                name=data.name,
                birth_date=data.birth_date,
            )
    except Exception as e:
        # The row is only durable once Core commits on exit, so a commit
        # failure is still a registration failure
        failure = classify_failure(e, RegistrationFailed)
        if failure is e:
            raise
        logger.exception(f"Registration failed for {data.email}")
        raise failure from e

    return jsonify(user.to_response().model_dump(mode="json", by_alias=True)), 201


@auth_bp.route("/auth/login", methods=["POST"])
@validate_request
def login(data: LoginRequest):
    """
    Authenticate and return a session token.

    Token claims: email, name, age (whole years), iat, exp.

    Error Responses:
        400: ValidationError (bad payload) or InvalidCredentials
        404: UserNotFound
        500: LoginFailed

    Example response:
    ```json
    {
        "data": {
            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
        }
    }
    ```
    """
    with get_core(atomic=True) as core:
        token_data = _auth_service(core).login(data.email, data.password)

    return jsonify(LoginResponse(data=token_data).model_dump()), 200
