"""HTTP middleware."""

import logfire
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from social.domain.error import RateLimitError
from social.interface.api.errors import error_response
from social.util.ratelimiter import FixedWindowRateLimiter


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients that exceed their request budget with a 429.

    Requests are counted per client address.
    """

    def __init__(self, app: ASGIApp, limiter: FixedWindowRateLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        client = request.client.host if request.client else "unknown"

        allowed, retry_after = self.limiter.allow(client)
        if not allowed:
            error = RateLimitError(retry_after)
            logfire.warn(
                "Rate limit exceeded",
                client=client,
                method=request.method,
                path=request.url.path,
                retry_after=retry_after,
            )
            return error_response(
                status.HTTP_429_TOO_MANY_REQUESTS,
                str(error),
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)
