"""Logfire setup and library instrumentation.

Services log and trace through logfire directly:

    logfire.info("User registered", user_id=user.id, username=str(user.username))

    with logfire.span("post_service.update_post", post_id=post.id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from social.config import Settings

# Request routes whose validated values hold credentials
CREDENTIAL_PATHS = ("/v1/authentication/", "/v1/users/activate/")

# Health checks would drown the request traces
UNTRACED_URLS = r".*/v1/health$"


def _send_to_logfire(settings: Settings) -> bool:
    # Explicit setting wins, then token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Invitation tokens and bearer tokens are scrubbed in addition to
    Logfire's default patterns.

    Args:
        settings: Application settings
    """
    send_to_logfire = _send_to_logfire(settings)

    logfire.configure(
        service_name="social-api",
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["token", "bearer"]),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    path = request.url.path
    result = {**attributes, "path": path}

    if path.startswith(CREDENTIAL_PATHS):
        result.pop("values", None)

    if request.client:
        result["client_host"] = request.client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests except health checks.

    Headers are not captured since they carry bearer tokens and basic
    credentials.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (mail delivery)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")


def instrument_redis() -> None:
    """Trace Redis commands issued by the user cache."""
    logfire.instrument_redis()
    logfire.info("Redis instrumented")
