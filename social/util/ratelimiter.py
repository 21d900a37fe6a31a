"""Per-client fixed-window rate limiting on top of ``limits``."""

import math
import time

from limits import RateLimitItemPerSecond, strategies
from limits.storage import MemoryStorage, Storage


class FixedWindowRateLimiter:
    """Allows ``limit`` requests per key in fixed windows of ``window_seconds``.

    Counters live in ``storage``, process memory by default; create one
    limiter per application.
    """

    def __init__(
        self, limit: int, window_seconds: int, storage: Storage | None = None
    ) -> None:
        """Initialize the limiter.

        Args:
            limit: Requests allowed per key per window
            window_seconds: Window length in seconds
            storage: Counter backend, a fresh MemoryStorage when omitted
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be at least 1")

        self.item = RateLimitItemPerSecond(limit, window_seconds)
        self.storage = storage or MemoryStorage()
        self._strategy = strategies.FixedWindowRateLimiter(self.storage)

    def allow(self, key: str) -> tuple[bool, int]:
        """Record a request for ``key``.

        Args:
            key: Client identifier (usually the remote address)

        Returns:
            ``(allowed, retry_after)`` where ``retry_after`` is the number of
            whole seconds until the window resets (0 when allowed)
        """
        if self._strategy.hit(self.item, key):
            return True, 0

        stats = self._strategy.get_window_stats(self.item, key)
        return False, max(1, math.ceil(stats.reset_time - time.time()))
