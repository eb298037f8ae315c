"""JWT token signing for session tokens.

The auth service only needs something with a ``sign(claims) -> str`` method
(see ``TokenSigner`` in auth.service). JWTSigner is the PyJWT-backed
implementation used by the HTTP app.

Every token carries the caller's claims plus:
- iat: Issued at (Unix timestamp)
- exp: Expiry (Unix timestamp)
"""

from collections.abc import Mapping
from typing import Any

import jwt

from ..config import settings
from ..utils import isodatetime


class JWTSigner:
    """Sign and decode HMAC JWTs with a shared secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiry_days: int = 30,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiry_seconds = expiry_days * 24 * 60 * 60

    def sign(self, claims: Mapping[str, Any]) -> str:
        """
        Encode claims into a signed token.

        Args:
            claims: Arbitrary JSON-serializable payload

        Returns:
            Encoded JWT string
        """
        now = isodatetime.now_unix()
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + self._expiry_seconds
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Verify a token's signature and expiry and return its payload.

        Raises:
            jwt.ExpiredSignatureError: If the token has expired
            jwt.InvalidTokenError: If the token is malformed or the signature is wrong
        """
        return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])


def default_signer() -> JWTSigner:
    """Build a signer from application settings."""
    return JWTSigner(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expiry_days=settings.jwt_expiry_days,
    )
