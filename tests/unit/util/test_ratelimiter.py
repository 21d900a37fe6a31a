"""Unit tests for the fixed-window rate limiter."""

import time

import pytest

from social.util.ratelimiter import FixedWindowRateLimiter


class TestFixedWindowRateLimiter:
    """Tests for FixedWindowRateLimiter.allow."""

    def test_allows_up_to_limit_then_denies(self):
        """The request after the limit is denied with a retry-after."""
        # Arrange
        limiter = FixedWindowRateLimiter(limit=3, window_seconds=5)

        # Act
        results = [limiter.allow("10.0.0.1") for _ in range(4)]

        # Assert
        assert results[:3] == [(True, 0)] * 3
        allowed, retry_after = results[3]
        assert allowed is False
        assert 1 <= retry_after <= 5

    def test_window_reset_allows_again(self):
        """Counters reset once the window has elapsed."""
        limiter = FixedWindowRateLimiter(limit=1, window_seconds=1)
        assert limiter.allow("10.0.0.1") == (True, 0)
        assert limiter.allow("10.0.0.1") == (False, 1)

        time.sleep(1.1)

        assert limiter.allow("10.0.0.1") == (True, 0)

    def test_keys_are_counted_separately(self):
        """One client exhausting its budget does not affect another."""
        limiter = FixedWindowRateLimiter(limit=1, window_seconds=5)

        assert limiter.allow("10.0.0.1")[0] is True
        assert limiter.allow("10.0.0.1")[0] is False
        assert limiter.allow("10.0.0.2")[0] is True

    def test_limiters_do_not_share_counters(self):
        """Each application gets its own storage."""
        first = FixedWindowRateLimiter(limit=1, window_seconds=5)
        second = FixedWindowRateLimiter(limit=1, window_seconds=5)

        first.allow("10.0.0.1")

        assert second.allow("10.0.0.1") == (True, 0)

    def test_rejects_invalid_configuration(self):
        with pytest.raises(ValueError):
            FixedWindowRateLimiter(limit=0, window_seconds=5)
        with pytest.raises(ValueError):
            FixedWindowRateLimiter(limit=1, window_seconds=0)
