"""Chirp SDK: async Python client for the Chirp social REST API."""

from chirp_sdk.client import Client
from chirp_sdk.errors import (
    ChirpError,
    ChirpHTTPError,
    ChirpNetworkError,
    ChirpResponseError,
    CursorLoopError,
    FetchFailed,
    IteratorExhausted,
)
from chirp_sdk.identifiers import UserRef
from chirp_sdk.pagination import Page, PageIterator

__all__ = [
    "ChirpError",
    "ChirpHTTPError",
    "ChirpNetworkError",
    "ChirpResponseError",
    "Client",
    "CursorLoopError",
    "FetchFailed",
    "IteratorExhausted",
    "Page",
    "PageIterator",
    "UserRef",
]
