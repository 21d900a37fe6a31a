"""Operational debug routes, protected by basic auth."""

import secrets

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import BaseModel

from social.config import BasicAuthSettings, Settings
from social.domain.error import InternalError

router = APIRouter(prefix="/debug", tags=["debug"], route_class=DishkaRoute)

basic_auth = HTTPBasic(auto_error=False)


class DebugVarsResponse(BaseModel):
    """Runtime switches and build information."""

    environment: str
    version: str
    git_sha: str
    debug: bool
    cache_enabled: bool
    rate_limiter_enabled: bool
    rate_limit: int
    rate_limit_window_seconds: int


def check_basic_auth(
    credentials: HTTPBasicCredentials | None, basic: BasicAuthSettings
) -> None:
    """Compare the supplied credentials against the configured pair.

    Raises:
        InternalError: If no credentials are configured
        HTTPException: 401 with a Basic challenge on missing or wrong credentials
    """
    if not basic.username or not basic.password:
        logfire.error("Basic auth credentials are not configured")
        raise InternalError("basic auth credentials are not configured")

    if credentials is None:
        logfire.warn("Missing basic auth credentials")
        raise _unauthorized()

    username_ok = secrets.compare_digest(
        credentials.username.encode(), basic.username.encode()
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode(), basic.password.encode()
    )
    if not (username_ok and password_ok):
        logfire.warn("Wrong basic auth credentials", username=credentials.username)
        raise _unauthorized()


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized basic",
        headers={"WWW-Authenticate": 'Basic realm="restricted", charset="UTF-8"'},
    )


@router.get("/vars", response_model=DebugVarsResponse)
async def debug_vars(
    settings: FromDishka[Settings],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> DebugVarsResponse:
    """Expose runtime configuration switches to operators."""
    check_basic_auth(credentials, settings.auth.basic)

    return DebugVarsResponse(
        environment=settings.environment,
        version=settings.version,
        git_sha=settings.git_sha,
        debug=settings.debug,
        cache_enabled=settings.redis.enabled,
        rate_limiter_enabled=settings.rate_limiter.enabled,
        rate_limit=settings.rate_limiter.requests_per_time_frame,
        rate_limit_window_seconds=settings.rate_limiter.time_frame_seconds,
    )
