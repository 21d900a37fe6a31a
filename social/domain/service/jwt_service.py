"""JWT token domain service."""

from datetime import datetime

import logfire

from social.config import TokenSettings
from social.util.jwt import TokenClaims, create_token, verify_token
from social.domain.value import UserId

from .base import Service


class JWTService(Service):
    """Issues and validates bearer tokens."""

    def __init__(self, token_settings: TokenSettings) -> None:
        """Initialize JWT service.

        Args:
            token_settings: Signing secret, lifetime, issuer and audience
        """
        self.token_settings = token_settings

    def create_token(self, user_id: UserId, now: datetime | None = None) -> str:
        """Create a bearer token for a user.

        Args:
            user_id: Subject of the token
            now: Issue time, defaults to the current time

        Returns:
            JWT token string

        Raises:
            SigningError: If the token cannot be signed
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(str(user_id), self.token_settings, now=now)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenClaims:
        """Verify a bearer token and return its claims.

        Raises:
            JWTError: If the token is invalid, malformed or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                claims = verify_token(token, self.token_settings)
            except Exception as e:
                logfire.warn(
                    "JWT token verification failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            logfire.debug("JWT token verified", subject=claims.sub)
            return claims
