"""HTTP transport: authentication, rate-limit windows and bounded retry."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from chirp_sdk.errors import ChirpHTTPError, ChirpNetworkError
from chirp_sdk.rate_limit import BucketInfo, RateLimiter

log = logging.getLogger(__name__)

_DEFAULT_RETRY_DELAY = 1.0
# 420 is the older "enhance your calm" rate-limit answer
_RATE_LIMITED_STATUSES = frozenset({420, 429})
_SERVER_ERROR_STATUSES = frozenset({500, 502, 503, 504})


class HTTPClient:
    """Async HTTP client for the REST API.

    Requests are authenticated with a bearer ``token``, an ``httpx.Auth``
    signer passed as ``auth`` (e.g. an OAuth 1.0a implementation), or both.
    Rate-limited and server-error answers are retried until ``max_attempts``
    requests have been made.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        auth: httpx.Auth | None = None,
        timeout: float = 30.0,
        max_attempts: int = 3,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.max_attempts = max_attempts
        self.rate_limiter = RateLimiter()
        self._client = httpx.AsyncClient(base_url=self.base_url, auth=auth, timeout=timeout)

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send an API call and return the first non-error response."""
        merged_headers = {**self._headers(), **(headers or {})}
        attempt = 1
        while True:
            response, bucket = await self._send(
                method, path, params=params, data=data, files=files, headers=merged_headers,
            )
            if response.status_code < 400:
                return response

            error = ChirpHTTPError.from_response(response)
            delay = self._retry_delay(error, bucket, attempt)
            if delay is None:
                raise error
            log.warning(
                "%s %s answered %d (attempt %d/%d), retrying in %.1fs",
                method, path, error.status, attempt, self.max_attempts, delay,
            )
            if delay > 0:
                await asyncio.sleep(delay)
            attempt += 1

    async def _send(
        self, method: str, path: str, **kwargs: Any
    ) -> tuple[httpx.Response, BucketInfo | None]:
        """One request: wait for the family's window, send, record the new window."""
        await self.rate_limiter.wait_if_needed(path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            raise ChirpNetworkError(str(exc)) from exc
        return response, self.rate_limiter.record(path, response)

    def _retry_delay(
        self, error: ChirpHTTPError, bucket: BucketInfo | None, attempt: int
    ) -> float | None:
        """Seconds to sleep before retrying ``error``, None when it is final."""
        if attempt >= self.max_attempts:
            return None
        if error.status in _RATE_LIMITED_STATUSES:
            # An exhausted window is waited out by the rate limiter before the next send.
            if bucket is not None and bucket.blocked_for() > 0:
                return 0.0
            if error.retry_after is not None:
                return error.retry_after
            return _DEFAULT_RETRY_DELAY
        if error.status in _SERVER_ERROR_STATUSES:
            return _DEFAULT_RETRY_DELAY * 2 ** (attempt - 1)
        return None

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def download(self, url: str) -> bytes:
        """Fetch raw bytes from an absolute URL (media hosts, not the API)."""
        try:
            response = await self._client.get(url)
        except httpx.TransportError as exc:
            raise ChirpNetworkError(str(exc)) from exc
        if response.status_code >= 400:
            raise ChirpHTTPError.from_response(response)
        return response.content

    async def close(self) -> None:
        await self._client.aclose()
