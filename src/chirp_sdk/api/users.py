"""Users API methods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from chirp_sdk.identifiers import UserLike, UserRef, bulk_params
from chirp_sdk.models.enums import ImageSize
from chirp_sdk.models.users import UserResponse
from chirp_sdk.pagination import PageIterator, cursored

if TYPE_CHECKING:
    from chirp_sdk.http import HTTPClient

log = logging.getLogger(__name__)

IDS_PER_PAGE = 5000
USERS_PER_PAGE = 200
LOOKUP_BATCH_SIZE = 100


class UsersAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(self, user: UserLike) -> UserResponse:
        ref = UserRef.of(user)
        r = await self._http.get("/users/show.json", params=ref.to_params())
        return UserResponse.model_validate(r.json())

    async def get_many(self, users: Iterable[UserLike]) -> list[UserResponse]:
        """Look up to 100 users in one request. Unknown users are omitted by the server."""
        params = bulk_params(users)
        if not params:
            return []
        r = await self._http.get("/users/lookup.json", params=params)
        return [UserResponse.model_validate(u) for u in r.json()]

    async def lookup(
        self, users: Iterable[UserLike], *, batch_size: int = LOOKUP_BATCH_SIZE
    ) -> list[UserResponse]:
        """Look up any number of users, ``batch_size`` per request."""
        if not 1 <= batch_size <= LOOKUP_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {LOOKUP_BATCH_SIZE}")
        refs = [UserRef.of(u, "users") for u in users]
        found: list[UserResponse] = []
        for start in range(0, len(refs), batch_size):
            found.extend(await self.get_many(refs[start:start + batch_size]))
        log.debug("Looked up %d of %d users", len(found), len(refs))
        return found

    # --- Follow graph ---

    def get_friend_ids(
        self,
        user: UserLike,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        """Ids of the users ``user`` follows."""
        return cursored(
            self._http, "/friends/ids.json", "ids",
            params=UserRef.of(user).to_params(),
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    def get_follower_ids(
        self,
        user: UserLike,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        """Ids of the users following ``user``."""
        return cursored(
            self._http, "/followers/ids.json", "ids",
            params=UserRef.of(user).to_params(),
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    async def follow(self, user: UserLike, *, notify: bool = False) -> UserResponse:
        params: dict[str, Any] = UserRef.of(user).to_params()
        if notify:
            params["follow"] = "true"
        r = await self._http.post("/friendships/create.json", params=params)
        return UserResponse.model_validate(r.json())

    async def unfollow(self, user: UserLike) -> UserResponse:
        r = await self._http.post("/friendships/destroy.json", params=UserRef.of(user).to_params())
        return UserResponse.model_validate(r.json())

    # --- Blocks ---

    async def block(self, user: UserLike) -> UserResponse:
        r = await self._http.post("/blocks/create.json", params=UserRef.of(user).to_params())
        return UserResponse.model_validate(r.json())

    async def unblock(self, user: UserLike) -> UserResponse:
        r = await self._http.post("/blocks/destroy.json", params=UserRef.of(user).to_params())
        return UserResponse.model_validate(r.json())

    async def report_spam(self, user: UserLike, *, perform_block: bool = True) -> UserResponse:
        params: dict[str, Any] = UserRef.of(user).to_params()
        params["perform_block"] = "true" if perform_block else "false"
        r = await self._http.post("/users/report_spam.json", params=params)
        return UserResponse.model_validate(r.json())

    def get_blocked_user_ids(
        self,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        return cursored(
            self._http, "/blocks/ids.json", "ids",
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    def get_blocked_users(
        self,
        *,
        page_size: int = USERS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[UserResponse]:
        return cursored(
            self._http, "/blocks/list.json", "users",
            parse=UserResponse.model_validate,
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    # --- Media ---

    async def get_profile_image(
        self, user: UserLike | UserResponse, size: ImageSize | str = ImageSize.normal
    ) -> bytes:
        """Download a user's avatar. Passing a fetched user saves the lookup."""
        profile = user if isinstance(user, UserResponse) else await self.get(user)
        url = profile.profile_image_url_https
        if not url:
            raise ValueError(f"User {profile.screen_name} has no profile image")
        size = ImageSize(size)
        if size is ImageSize.original:
            url = url.replace("_normal", "")
        elif size is not ImageSize.normal:
            url = url.replace("_normal", f"_{size.value}")
        log.debug("Downloading profile image of %s from %s", profile.screen_name, url)
        return await self._http.download(url)
