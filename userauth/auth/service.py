"""Authentication service: account registration and login.

Both operations follow the same shape:

1. domain check (lookup by email)
2. short-circuit with a classified failure when the check fails
3. side-effecting work (hash and persist, or verify and sign)
4. any unclassified exception is logged and masked as a server error

Classified failures (ClassifiedError subclasses) always reach the caller
as the same object that was raised. Only unclassified exceptions are
replaced, and the replacement carries a fixed message.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, Protocol

import bcrypt

from ..config import settings
from ..exceptions import (
    ClassifiedError,
    DuplicateAccount,
    InvalidCredentials,
    LoginFailed,
    RegistrationFailed,
    UserNotFound,
)
from ..utils import isodatetime
from .schemas import SessionClaims, StoredUser, TokenData

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


# ============================================================================
# Collaborator Interfaces
# ============================================================================


class CredentialStore(Protocol):
    """User record store consumed by AuthService."""

    def find_active_by_email(self, email: str) -> StoredUser | None: ...

    def create(
        self,
        email: str,
        password: str,
        name: str,
        birth_date: date,
    ) -> StoredUser: ...


class TokenSigner(Protocol):
    """Opaque signing operation over a claims payload."""

    def sign(self, claims: Mapping[str, Any]) -> str: ...


# ============================================================================
# Password Hashing
# ============================================================================


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, work_factor: int | None = None) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        work_factor: bcrypt cost (log2 rounds); defaults to settings.bcrypt_work_factor

    Returns:
        bcrypt hash string (60 characters, includes salt and cost)
    """
    rounds = work_factor if work_factor is not None else settings.bcrypt_work_factor
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Returns False for a wrong password and for a hash bcrypt cannot parse.
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        return False


# ============================================================================
# Failure Classification
# ============================================================================


def classify_failure(
    error: Exception,
    fallback: type[ClassifiedError],
) -> ClassifiedError:
    """
    Translate any exception into a classified failure.

    A ClassifiedError is returned untouched. Anything else is replaced by a
    fresh ``fallback()`` carrying its fixed, non-leaking message.
    """
    if isinstance(error, ClassifiedError):
        return error
    return fallback()


# ============================================================================
# Auth Service
# ============================================================================


class AuthService:
    """
    Registration and login over a credential store and a token signer.

    Collaborators are passed in explicitly so that each request can build its
    own service around its own database connection:

    ```python
    with get_core(atomic=True) as core:
        service = AuthService(core.user, token.default_signer())
        user = service.register("a@b.com", "pw", "A", date(1990, 1, 1))
    ```
    """

    def __init__(
        self,
        store: CredentialStore,
        signer: TokenSigner,
        logger: logging.Logger | None = None,
        clock: Callable[[], date] = isodatetime.today,
        work_factor: int | None = None,
    ):
        """
        Args:
            store: Credential store (find_active_by_email, create)
            signer: Token signer (sign)
            logger: Logger for failures; defaults to this module's logger
            clock: Returns the current date, used to derive age at login
            work_factor: bcrypt cost; defaults to settings.bcrypt_work_factor
        """
        self._store = store
        self._signer = signer
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock
        self._work_factor = (
            work_factor if work_factor is not None else settings.bcrypt_work_factor
        )

    def register(
        self,
        email: str,
        password: str,
        name: str,
        birth_date: date,
    ) -> StoredUser:
        """
        Create a new account.

        Returns:
            The stored user, including the password hash. Callers exposing the
            record externally should use StoredUser.to_response().

        Raises:
            DuplicateAccount: An active account already uses this email
            RegistrationFailed: Any unclassified failure (store unavailable,
                constraint violation from a concurrent registration, ...)
        """
        try:
            if self._store.find_active_by_email(email) is not None:
                raise DuplicateAccount()

            hashed = hash_password(password, self._work_factor)
            user = self._store.create(
                email=email,
                password=hashed,
                name=name,
                birth_date=birth_date,
            )
        except Exception as e:
            failure = self._translate(e, RegistrationFailed, f"Registration failed for {email}")
            if failure is e:
                raise
            raise failure from e

        self._logger.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> TokenData:
        """
        Authenticate by email and password and issue a session token.

        The token carries {email, name, age} claims, with age in whole years
        as of the clock's current date.

        Raises:
            UserNotFound: No active account has this email
            InvalidCredentials: Password does not match
            LoginFailed: Any unclassified failure
        """
        try:
            user = self._store.find_active_by_email(email)
            if user is None:
                raise UserNotFound()

            if not verify_password(password, user.password):
                raise InvalidCredentials()

            claims = SessionClaims(
                email=user.email,
                name=user.name,
                age=isodatetime.years_between(user.birth_date, self._clock()),
            )
            token = self._signer.sign(claims.model_dump())
        except Exception as e:
            failure = self._translate(e, LoginFailed, f"Login failed for {email}")
            if failure is e:
                raise
            raise failure from e

        self._logger.info(f"Successful login: {user.id}")
        return TokenData(token=token)

    def _translate(
        self,
        error: Exception,
        fallback: type[ClassifiedError],
        context: str,
    ) -> ClassifiedError:
        failure = classify_failure(error, fallback)
        if failure is error:
            self._logger.warning(f"{context}: {failure.message}")
        else:
            self._logger.exception(f"{context}: unexpected error")
        return failure
