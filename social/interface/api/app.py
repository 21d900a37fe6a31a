"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from social.config import Settings
from social.interface.api.errors import register_error_handlers
from social.interface.api.middleware import RateLimitMiddleware
from social.interface.api.routes import auth, comments, debug, health, posts, users
from social.util.di.container import create_container, setup_di
from social.util.observability import instrument_fastapi, instrument_httpx
from social.util.ratelimiter import FixedWindowRateLimiter

API_PREFIX = "/v1"


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings, loaded from the environment if omitted
        container: DI container, the production container if omitted

    Returns:
        Configured application
    """
    settings = settings or Settings()

    # Outbound mail requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Social API",
        description="Backend API for a social blogging platform",
        version=settings.version,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=300,
    )

    if settings.rate_limiter.enabled:
        app_instance.add_middleware(
            RateLimitMiddleware,
            limiter=FixedWindowRateLimiter(
                limit=settings.rate_limiter.requests_per_time_frame,
                window_seconds=settings.rate_limiter.time_frame_seconds,
            ),
        )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router, prefix=API_PREFIX)
    app_instance.include_router(debug.router, prefix=API_PREFIX)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(users.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
