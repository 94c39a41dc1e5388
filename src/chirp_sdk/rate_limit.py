"""Rate-limit windows reported by the API, one per resource family.

Every response carries ``x-rate-limit-limit``, ``x-rate-limit-remaining`` and
``x-rate-limit-reset`` (unix seconds) for the family the endpoint belongs to:
``/friends/ids.json`` and ``/friends/list.json`` share the ``friends`` window.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Mapping

import httpx

log = logging.getLogger(__name__)

_FAMILIES = frozenset({
    "account",
    "blocks",
    "followers",
    "friends",
    "friendships",
    "mutes",
    "users",
})


def classify(path: str) -> str:
    """Map a URL path to its rate-limit family.

    ``/1.1/friends/ids.json`` → ``friends``. Paths outside the known families
    share the ``application`` window.
    """
    for segment in path.split("/"):
        name = segment.removesuffix(".json")
        if name in _FAMILIES:
            return name
    return "application"


@dataclass
class BucketInfo:
    limit: int = 0
    remaining: int = 0
    reset: float = 0.0  # unix timestamp

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> BucketInfo | None:
        limit = headers.get("x-rate-limit-limit")
        if limit is None:
            return None
        remaining = headers.get("x-rate-limit-remaining")
        reset = headers.get("x-rate-limit-reset")
        return cls(
            limit=int(limit),
            remaining=int(remaining) if remaining else 0,
            reset=float(reset) if reset else 0.0,
        )

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def seconds_until_reset(self, now: float | None = None) -> float:
        if now is None:
            now = time.time()
        return max(self.reset - now, 0.0)

    def blocked_for(self, now: float | None = None) -> float:
        """Seconds a new request must wait, 0 when the window has calls left."""
        if not self.exhausted:
            return 0.0
        return self.seconds_until_reset(now)


class RateLimiter:
    """Remembers the last window seen per family and holds requests back
    while that window is used up."""

    def __init__(self) -> None:
        self._buckets: dict[str, BucketInfo] = {}
        self._gates: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def bucket(self, path: str) -> BucketInfo | None:
        """Last known window for the family of ``path``."""
        return self._buckets.get(classify(path))

    def remaining(self, path: str) -> int | None:
        bucket = self.bucket(path)
        return bucket.remaining if bucket else None

    def reset_at(self, path: str) -> float | None:
        bucket = self.bucket(path)
        return bucket.reset if bucket else None

    def snapshot(self) -> dict[str, BucketInfo]:
        """Copy of every known window keyed by family."""
        return dict(self._buckets)

    def record(self, path: str, response: httpx.Response) -> BucketInfo | None:
        """Store the window reported by ``response``; None when it reports none."""
        bucket = BucketInfo.from_headers(response.headers)
        if bucket is not None:
            self._buckets[classify(path)] = bucket
        return bucket

    def delay_for(self, path: str) -> float:
        bucket = self.bucket(path)
        return bucket.blocked_for() if bucket else 0.0

    async def wait_if_needed(self, path: str) -> None:
        """Sleep until the family's window resets if it has no calls left.

        Requests of one family queue on a shared lock, so a single waiter
        sleeps while the others re-check once it is done.
        """
        if self.delay_for(path) <= 0:
            return
        family = classify(path)
        async with self._gates[family]:
            delay = self.delay_for(path)
            if delay > 0:
                log.debug("Rate limit for %s exhausted, waiting %.1fs", family, delay)
                await asyncio.sleep(delay)
