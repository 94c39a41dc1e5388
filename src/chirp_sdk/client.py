"""High-level client composing the HTTP layer and API groups."""

from __future__ import annotations

from typing import Any

import httpx

from chirp_sdk.api.account import AccountAPI
from chirp_sdk.api.friendships import FriendshipsAPI
from chirp_sdk.api.users import UsersAPI
from chirp_sdk.http import HTTPClient


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("https://api.chirp.example/1.1", auth=oauth) as client:
            me = await client.account.get_authenticated_user()
            follower_ids = await client.users.get_follower_ids(me.id).collect(1000)

    ``auth`` is any ``httpx.Auth`` that signs outgoing requests; ``token`` is
    sent as a bearer token for app-only access.
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
        self.http = HTTPClient(
            base_url, token, auth=auth, timeout=timeout, max_attempts=max_attempts,
        )
        self.users = UsersAPI(self.http)
        self.account = AccountAPI(self.http, self.users)
        self.friendships = FriendshipsAPI(self.http, self.users)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
