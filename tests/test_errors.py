"""Unit tests for error classes."""

from __future__ import annotations

import httpx
import pytest

from chirp_sdk.errors import (
    ChirpError,
    ChirpHTTPError,
    ChirpNetworkError,
    ChirpResponseError,
    CursorLoopError,
    FetchFailed,
    IteratorExhausted,
)
from chirp_sdk.models.errors import ErrorCode


class TestChirpHTTPError:
    def test_from_response(self):
        response = httpx.Response(
            401,
            json={"errors": [{"code": 89, "message": "Invalid or expired token."}]},
        )
        err = ChirpHTTPError.from_response(response)
        assert err.status == 401
        assert err.code == ErrorCode.INVALID_TOKEN
        assert err.error is not None
        assert err.error.message == "Invalid or expired token."
        assert err.response is response

    def test_from_response_no_body(self):
        response = httpx.Response(500, text="Internal Server Error")
        err = ChirpHTTPError.from_response(response)
        assert err.status == 500
        assert err.error is None
        assert err.code is None

    def test_from_response_unexpected_shape(self):
        response = httpx.Response(400, json=["not", "an", "object"])
        err = ChirpHTTPError.from_response(response)
        assert err.error is None

    def test_from_response_errors_not_a_list(self):
        response = httpx.Response(400, json={"errors": {"code": 32, "message": "bad auth"}})
        err = ChirpHTTPError.from_response(response)
        assert err.status == 400
        assert err.error is None
        assert err.response is response

    @pytest.mark.parametrize("errors", [[], ["Not authorized."], [{"message": "no code"}], "oops"])
    def test_from_response_malformed_errors(self, errors):
        response = httpx.Response(403, json={"errors": errors})
        err = ChirpHTTPError.from_response(response)
        assert err.status == 403
        assert err.error is None
        assert "403" in str(err)

    def test_unknown_error_code(self):
        response = httpx.Response(403, json={"errors": [{"code": 99999, "message": "?"}]})
        err = ChirpHTTPError.from_response(response)
        assert err.error is not None
        assert err.error.code == 99999
        assert err.code is None

    def test_retry_after(self):
        response = httpx.Response(
            429,
            json={"errors": [{"code": 88, "message": "Rate limit exceeded"}]},
            headers={"retry-after": "30"},
        )
        err = ChirpHTTPError.from_response(response)
        assert err.code == ErrorCode.RATE_LIMIT_EXCEEDED
        assert err.retry_after == 30.0

    def test_str(self):
        response = httpx.Response(
            404,
            json={"errors": [{"code": 34, "message": "Sorry, that page does not exist."}]},
        )
        s = str(ChirpHTTPError.from_response(response))
        assert "404" in s
        assert "34" in s
        assert "does not exist" in s

    def test_no_error_properties(self):
        err = ChirpHTTPError(status=500)
        assert err.code is None
        assert err.retry_after is None


class TestHierarchy:
    def test_fetch_failures(self):
        for err in (
            ChirpHTTPError(500),
            ChirpNetworkError("down"),
            CursorLoopError(5),
            ChirpResponseError("bad body"),
        ):
            assert isinstance(err, FetchFailed)
            assert isinstance(err, ChirpError)

    def test_exhausted_is_not_a_fetch_failure(self):
        err = IteratorExhausted(0)
        assert isinstance(err, ChirpError)
        assert not isinstance(err, FetchFailed)
