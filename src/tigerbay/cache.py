"""Thread-safe single-slot cache with server-declared expiry.

Holds one value (an access token, in practice) together with the absolute
time at which it stops being usable. Callers either get the cached value or
trigger exactly one fetch that replaces it.
"""

import time
from collections.abc import Callable
from threading import Lock
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class AtomicExpiringCache(Generic[T]):
    """Thread-safe cache holding a single value until its expiry time.

    Concurrent callers that find the slot empty or expired are serialized by
    a lock, so only the first of them fetches; the rest observe the fresh
    value. A value is served only while ``time.time() < expires_at``.
    """

    def __init__(self):
        """Initialize an empty cache."""
        self._lock = Lock()
        self._value: T | None = None
        self._expires_at: float | None = None

    @property
    def expires_at(self) -> float | None:
        """Epoch seconds at which the cached value expires, or None if empty."""
        return self._expires_at

    def get_or_fetch(self, fetch_func: Callable[[], tuple[T, float]]) -> tuple[T, bool]:
        """Return the cached value, fetching a new one if empty or expired.

        Args:
            fetch_func: Function returning ``(value, ttl_seconds)``. The
                expiry is computed from the time the fetch completes.

        Returns:
            Tuple of (value, fetched) where ``fetched`` is True if
            ``fetch_func`` was called.

        Raises:
            Exception: Whatever ``fetch_func`` raises. The cached slot is left
                untouched in that case.
        """
        with self._lock:
            now = time.time()
            if (
                self._value is not None
                and self._expires_at is not None
                and now < self._expires_at
            ):
                logger.debug(
                    "Using cached value",
                    remaining_seconds=round(self._expires_at - now, 2),
                )
                return self._value, False

            value, ttl = fetch_func()
            self._value = value
            self._expires_at = time.time() + ttl
            logger.debug("Stored fresh value", ttl_seconds=ttl)
            return value, True
