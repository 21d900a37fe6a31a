"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from social.config import TokenSettings


class TokenClaims(BaseModel):
    """Registered claims carried by a bearer token."""

    sub: str
    iss: str
    aud: str
    iat: int
    nbf: int
    exp: int


class JWTError(Exception):
    """JWT-related error."""

    pass


class SigningError(JWTError):
    """Token could not be signed."""

    pass


class InvalidSignatureError(JWTError):
    """Token signature does not match."""

    pass


class TokenExpiredError(JWTError):
    """Token is past its expiry claim."""

    pass


class MalformedTokenError(JWTError):
    """Token could not be parsed."""

    pass


def create_token(
    subject: str, settings: TokenSettings, now: datetime | None = None
) -> str:
    """Create a signed bearer token.

    Args:
        subject: User ID the token is issued to
        settings: Token settings
        now: Issue time (defaults to the current time)

    Returns:
        Encoded JWT token

    Raises:
        SigningError: If no secret is configured or signing fails
    """
    if not settings.secret:
        raise SigningError("Token secret is not configured")

    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(hours=settings.expiry_hours)

    claims = TokenClaims(
        sub=subject,
        iss=settings.issuer,
        aud=settings.audience,
        iat=int(issued_at.timestamp()),
        nbf=int(issued_at.timestamp()),
        exp=int(expiry.timestamp()),
    )

    try:
        return jwt.encode(
            claims.model_dump(), settings.secret, algorithm=settings.algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError) as e:
        raise SigningError(str(e)) from e


def verify_token(token: str, settings: TokenSettings) -> TokenClaims:
    """Verify and decode a bearer token.

    Args:
        token: JWT token to verify
        settings: Token settings

    Returns:
        Decoded claims

    Raises:
        TokenExpiredError: If the token is expired
        InvalidSignatureError: If the signature does not match
        MalformedTokenError: If the token cannot be decoded or its claims
            have the wrong types
        JWTError: If issuer, audience or not-before checks fail
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            audience=settings.audience,
            issuer=settings.issuer,
            options={"require": ["sub", "iss", "aud", "iat", "nbf", "exp"]},
        )
        return TokenClaims(**payload)
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidSignatureError:
        raise InvalidSignatureError("Token signature is invalid")
    except jwt.DecodeError:
        raise MalformedTokenError("Token is malformed")
    except ValidationError:
        raise MalformedTokenError("Token claims are malformed")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")
