"""Unit tests for JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from social.config import TokenSettings
from social.util.jwt import (
    InvalidSignatureError,
    JWTError,
    MalformedTokenError,
    SigningError,
    TokenExpiredError,
    create_token,
    verify_token,
)


@pytest.fixture
def token_settings():
    return TokenSettings(secret="test-secret", expiry_hours=72)


class TestCreateToken:
    """Tests for token creation."""

    def test_token_round_trips_claims(self, token_settings):
        """A fresh token verifies and carries the subject and audience."""
        # Act
        token = create_token("42", token_settings)
        claims = verify_token(token, token_settings)

        # Assert
        assert claims.sub == "42"
        assert claims.iss == "social"
        assert claims.aud == "social"
        assert claims.exp - claims.iat == 72 * 3600

    def test_missing_secret_raises_signing_error(self):
        """Tokens are never signed with an empty secret."""
        with pytest.raises(SigningError):
            create_token("42", TokenSettings(secret=""))


class TestVerifyToken:
    """Tests for token verification."""

    def test_expired_token_raises_token_expired_error(self, token_settings):
        """A token issued past its lifetime is rejected."""
        issued = datetime.now(timezone.utc) - timedelta(hours=100)
        token = create_token("42", token_settings, now=issued)

        with pytest.raises(TokenExpiredError):
            verify_token(token, token_settings)

    def test_other_secret_raises_invalid_signature(self, token_settings):
        """A token signed with another secret is rejected."""
        token = create_token("42", TokenSettings(secret="other-secret"))

        with pytest.raises(InvalidSignatureError):
            verify_token(token, token_settings)

    def test_garbage_raises_malformed_token_error(self, token_settings):
        """Unparsable input is reported as malformed."""
        with pytest.raises(MalformedTokenError):
            verify_token("not-a-token", token_settings)

    def test_wrong_audience_is_rejected(self, token_settings):
        """Tokens for another audience are not accepted."""
        token = create_token(
            "42", TokenSettings(secret="test-secret", audience="elsewhere")
        )

        with pytest.raises(JWTError):
            verify_token(token, token_settings)

    def test_mistyped_claims_raise_malformed_token_error(self, token_settings):
        """A correctly signed token whose claims have the wrong types."""
        # Arrange
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode(
            {
                "sub": "42",
                "iss": "social",
                "aud": ["social", "other"],
                "iat": now,
                "nbf": now,
                "exp": now + 3600,
            },
            token_settings.secret,
            algorithm="HS256",
        )

        # Act & Assert
        with pytest.raises(MalformedTokenError):
            verify_token(token, token_settings)
