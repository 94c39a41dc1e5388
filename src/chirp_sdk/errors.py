"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from chirp_sdk.models.errors import ErrorCode, ErrorResponse


class ChirpError(Exception):
    """Base class for every error raised by the SDK."""


class IteratorExhausted(ChirpError):
    """Raised when a page is requested from a completed iterator."""

    def __init__(self, cursor: int) -> None:
        self.cursor = cursor
        super().__init__(f"No further pages after cursor {cursor}")


class FetchFailed(ChirpError):
    """Raised when a page or resource could not be fetched."""


class ChirpHTTPError(FetchFailed):
    """Raised when the API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        code = error.code if error else "UNKNOWN"
        msg = error.message if error else f"HTTP {status}"
        super().__init__(f"[{status}] {code}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> ChirpHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
            errors = body.get("errors") if isinstance(body, dict) else None
            if isinstance(errors, list) and errors:
                error = ErrorResponse.model_validate(errors[0])
        except ValueError:
            error = None
        return cls(status=response.status_code, error=error, response=response)

    @property
    def code(self) -> ErrorCode | None:
        if self.error is None:
            return None
        try:
            return ErrorCode(self.error.code)
        except ValueError:
            return None

    @property
    def retry_after(self) -> float | None:
        """Seconds the server asked us to wait, from the retry-after header."""
        if self.response is None:
            return None
        header = self.response.headers.get("retry-after")
        if header is None:
            return None
        try:
            return float(header)
        except ValueError:
            return None


class ChirpNetworkError(FetchFailed):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CursorLoopError(FetchFailed):
    """Raised when the server hands back the cursor that was just requested."""

    def __init__(self, cursor: int) -> None:
        self.cursor = cursor
        super().__init__(f"Server returned cursor {cursor} for the page it identifies")


class ChirpResponseError(FetchFailed):
    """Raised when a successful response carries a body the SDK cannot read."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        self.response = response
        super().__init__(message)
