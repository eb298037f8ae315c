"""
Tests for JWT token signing.

Tests verify that:
- Signed tokens carry the caller's claims plus iat/exp
- Tokens decode with the right secret and fail with the wrong one
- Expired tokens are rejected
- default_signer() follows settings
"""

import pytest
import jwt as pyjwt

from userauth.auth.token import JWTSigner, default_signer
from userauth.config import settings
from userauth.utils import isodatetime


CLAIMS = {"email": "a@b.com", "name": "A", "age": 34}


class TestSign:
    """Tests for JWTSigner.sign."""

    def test_sign_returns_string(self, signer):
        token = signer.sign(CLAIMS)
        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_token_contains_claims(self, signer):
        token = signer.sign(CLAIMS)
        payload = pyjwt.decode(token, options={"verify_signature": False})

        assert payload["email"] == "a@b.com"
        assert payload["name"] == "A"
        assert payload["age"] == 34
        assert isinstance(payload["iat"], int)
        assert isinstance(payload["exp"], int)

    def test_sign_does_not_mutate_claims(self, signer):
        claims = dict(CLAIMS)
        signer.sign(claims)
        assert claims == CLAIMS

    def test_expiry_follows_configuration(self, test_secret):
        signer = JWTSigner(test_secret, expiry_days=1)
        payload = pyjwt.decode(signer.sign(CLAIMS), options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 24 * 60 * 60

    def test_issued_at_is_current_time(self, signer):
        before = isodatetime.now_unix()
        token = signer.sign(CLAIMS)
        after = isodatetime.now_unix()

        payload = pyjwt.decode(token, options={"verify_signature": False})
        assert before - 2 <= payload["iat"] <= after + 2

    def test_signed_with_hs256(self, signer):
        token = signer.sign(CLAIMS)
        assert pyjwt.get_unverified_header(token)["alg"] == "HS256"


class TestDecode:
    """Tests for JWTSigner.decode."""

    def test_decode_valid_token(self, signer):
        payload = signer.decode(signer.sign(CLAIMS))
        assert payload["email"] == "a@b.com"

    def test_decode_wrong_secret_raises(self, signer):
        other = JWTSigner("another-secret-key-that-is-long-enough-0123")
        with pytest.raises(pyjwt.InvalidSignatureError):
            signer.decode(other.sign(CLAIMS))

    def test_decode_expired_token_raises(self, signer, test_secret):
        past = isodatetime.now_unix() - 60 * 60
        expired = pyjwt.encode(
            {**CLAIMS, "iat": past - 60, "exp": past},
            test_secret,
            algorithm="HS256",
        )
        with pytest.raises(pyjwt.ExpiredSignatureError):
            signer.decode(expired)

    def test_decode_garbage_raises(self, signer):
        with pytest.raises(pyjwt.InvalidTokenError):
            signer.decode("not.a.token")


class TestDefaultSigner:
    def test_default_signer_uses_settings_secret(self):
        token = default_signer().sign(CLAIMS)
        payload = pyjwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
        assert payload["name"] == "A"
