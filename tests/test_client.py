"""Unit tests for the Client class."""

from __future__ import annotations

import httpx
import pytest

from chirp_sdk.api.account import AccountAPI
from chirp_sdk.api.friendships import FriendshipsAPI
from chirp_sdk.api.users import UsersAPI
from chirp_sdk.client import Client


class TestWiring:
    def test_api_groups_share_http(self):
        client = Client("https://api.chirp.test/1.1", token="t")
        assert isinstance(client.account, AccountAPI)
        assert isinstance(client.users, UsersAPI)
        assert isinstance(client.friendships, FriendshipsAPI)
        assert client.account._http is client.http
        assert client.users._http is client.http
        assert client.friendships._http is client.http

    def test_user_lookups_go_through_users_group(self):
        client = Client("https://api.chirp.test/1.1", token="t")
        assert client.account._users is client.users
        assert client.friendships._users is client.users

    def test_max_attempts_reaches_http(self):
        client = Client("https://api.chirp.test/1.1", max_attempts=5)
        assert client.http.max_attempts == 5

    def test_token_and_base_url(self):
        client = Client("https://api.chirp.test/1.1/", token="abc")
        assert client.http.token == "abc"
        assert client.http.base_url == "https://api.chirp.test/1.1"

    def test_independent_clients(self):
        a = Client("https://api.chirp.test/1.1")
        b = Client("https://api.chirp.test/1.1")
        assert a.http is not b.http
        assert a.http.rate_limiter is not b.http.rate_limiter


class TestContextManager:
    @pytest.mark.asyncio
    async def test_closes_http(self):
        async with Client("https://api.chirp.test/1.1") as client:
            inner = client.http._client
            assert not inner.is_closed
        assert inner.is_closed


class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_collect_follower_ids(self):
        class Transport(httpx.AsyncBaseTransport):
            async def handle_async_request(self, request):
                cursor = request.url.params.get("cursor")
                if cursor is None:
                    return httpx.Response(200, json={
                        "ids": [1, 2, 3], "next_cursor": 100, "previous_cursor": 0,
                    })
                return httpx.Response(200, json={
                    "ids": [4, 5], "next_cursor": 0, "previous_cursor": -100,
                })

        client = Client("https://api.chirp.test/1.1", token="t")
        client.http._client = httpx.AsyncClient(
            base_url="https://api.chirp.test/1.1", transport=Transport(),
        )
        async with client:
            ids = await client.users.get_follower_ids("jack").collect(4)
        assert ids == [1, 2, 3, 4]
