"""
Rate limiter utility for API rate limiting.
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a single hit against the limiter."""

    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """
    Fixed-window rate limiter keyed by client.

    Each key may make ``max_requests`` hits per ``window_seconds``. The window
    starts at the key's first hit and is reset once it has elapsed.

    Example:
        limiter = FixedWindowRateLimiter(max_requests=60, window_seconds=60.0)
        result = limiter.hit("203.0.113.7")
        if not result.allowed:
            ...  # reject the request
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize rate limiter.

        Args:
            max_requests: Maximum number of hits allowed per window
            window_seconds: Length of a window in seconds
            clock: Monotonic time source, replaceable in tests
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # {key: (window_start, hits)}
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_prune = clock()

    def hit(self, key: str) -> RateLimitResult:
        """Record a hit for ``key`` and report whether it is within the limit."""
        now = self._clock()
        self._prune(now)

        start, hits = self._windows.get(key, (now, 0))
        if now - start >= self.window_seconds:
            start, hits = now, 0
        hits += 1
        self._windows[key] = (start, hits)

        return RateLimitResult(
            allowed=hits <= self.max_requests,
            limit=self.max_requests,
            remaining=max(self.max_requests - hits, 0),
            reset_after=max(start + self.window_seconds - now, 0.0),
        )

    def _prune(self, now: float) -> None:
        # Drop expired windows at most once per window length.
        if now - self._last_prune < self.window_seconds:
            return
        self._windows = {
            key: (start, hits)
            for key, (start, hits) in self._windows.items()
            if now - start < self.window_seconds
        }
        self._last_prune = now
