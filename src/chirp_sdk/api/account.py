"""Account API methods for the authenticated user."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

from chirp_sdk.api.users import UsersAPI
from chirp_sdk.identifiers import UserLike, UserRef
from chirp_sdk.models.account import AccountSettings
from chirp_sdk.models.suggestions import SuggestedUsers, SuggestionCategory
from chirp_sdk.models.users import UserResponse
from chirp_sdk.pagination import PageIterator, cursored

if TYPE_CHECKING:
    from chirp_sdk.http import HTTPClient

IDS_PER_PAGE = 5000
USERS_PER_PAGE = 200


def _flag(value: bool) -> str:
    return "true" if value else "false"


class AccountAPI:
    """Methods acting on the account the client is authenticated as."""

    def __init__(self, http: HTTPClient, users: UsersAPI | None = None) -> None:
        self._http = http
        self._users = users if users is not None else UsersAPI(http)

    async def get_authenticated_user(self, *, include_email: bool = False) -> UserResponse:
        params: dict[str, Any] = {"skip_status": "true"}
        if include_email:
            params["include_email"] = "true"
        r = await self._http.get("/account/verify_credentials.json", params=params)
        return UserResponse.model_validate(r.json())

    # --- Settings ---

    async def get_settings(self) -> AccountSettings:
        r = await self._http.get("/account/settings.json")
        return AccountSettings.model_validate(r.json())

    async def update_settings(
        self,
        *,
        language: str | None = None,
        time_zone: str | None = None,
        trend_location_woeid: int | None = None,
        sleep_time_enabled: bool | None = None,
        start_sleep_time: int | None = None,
        end_sleep_time: int | None = None,
    ) -> AccountSettings:
        params: dict[str, Any] = {}
        if language is not None:
            params["lang"] = language
        if time_zone is not None:
            params["time_zone"] = time_zone
        if trend_location_woeid is not None:
            params["trend_location_woeid"] = trend_location_woeid
        if sleep_time_enabled is not None:
            params["sleep_time_enabled"] = _flag(sleep_time_enabled)
        for key, hour in (("start_sleep_time", start_sleep_time), ("end_sleep_time", end_sleep_time)):
            if hour is None:
                continue
            if not 0 <= hour <= 23:
                raise ValueError(f"{key} must be an hour between 0 and 23")
            params[key] = f"{hour:02d}"
        r = await self._http.post("/account/settings.json", params=params)
        return AccountSettings.model_validate(r.json())

    # --- Profile ---

    async def update_profile(
        self,
        *,
        name: str | None = None,
        url: str | None = None,
        location: str | None = None,
        description: str | None = None,
        profile_link_color: str | None = None,
    ) -> UserResponse:
        params: dict[str, Any] = {}
        if name is not None:
            params["name"] = name
        if url is not None:
            params["url"] = url
        if location is not None:
            params["location"] = location
        if description is not None:
            params["description"] = description
        if profile_link_color is not None:
            params["profile_link_color"] = profile_link_color.lstrip("#")
        r = await self._http.post("/account/update_profile.json", params=params)
        return UserResponse.model_validate(r.json())

    async def update_profile_image(self, image: bytes) -> UserResponse:
        r = await self._http.post(
            "/account/update_profile_image.json",
            data={"image": base64.b64encode(image).decode("ascii"), "skip_status": "true"},
        )
        return UserResponse.model_validate(r.json())

    async def update_profile_banner(self, banner: bytes) -> None:
        await self._http.post(
            "/account/update_profile_banner.json",
            data={"banner": base64.b64encode(banner).decode("ascii")},
        )

    async def remove_profile_banner(self) -> None:
        await self._http.post("/account/remove_profile_banner.json")

    async def update_profile_background_image(
        self,
        image: bytes | None = None,
        *,
        media_id: int | None = None,
        tile: bool | None = None,
    ) -> UserResponse:
        """Set the background from raw image bytes or an already uploaded ``media_id``."""
        if (image is None) == (media_id is None):
            raise ValueError("Pass exactly one of image or media_id")
        params: dict[str, Any] = {"skip_status": "true"}
        if media_id is not None:
            params["media_id"] = media_id
        if tile is not None:
            params["tile"] = _flag(tile)
        data = None
        if image is not None:
            data = {"image": base64.b64encode(image).decode("ascii")}
        r = await self._http.post(
            "/account/update_profile_background_image.json", params=params, data=data,
        )
        return UserResponse.model_validate(r.json())

    # --- Follow requests ---

    def get_user_ids_requesting_friendship(
        self,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        """Users with a pending request to follow this (protected) account."""
        return cursored(
            self._http, "/friendships/incoming.json", "ids",
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    def get_user_ids_you_requested_to_follow(
        self,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        """Protected users this account asked to follow and that have not answered."""
        return cursored(
            self._http, "/friendships/outgoing.json", "ids",
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    async def get_users_you_requested_to_follow(
        self, *, max_items: int | None = None
    ) -> list[UserResponse]:
        ids = await self.get_user_ids_you_requested_to_follow(max_items=max_items).collect()
        return await self._users.lookup(ids)

    # --- Mutes ---

    def get_muted_user_ids(
        self,
        *,
        page_size: int = IDS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[int]:
        return cursored(
            self._http, "/mutes/users/ids.json", "ids",
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    def get_muted_users(
        self,
        *,
        page_size: int = USERS_PER_PAGE,
        max_items: int | None = None,
        start_cursor: int = 0,
    ) -> PageIterator[UserResponse]:
        return cursored(
            self._http, "/mutes/users/list.json", "users",
            parse=UserResponse.model_validate,
            page_size=page_size, max_items=max_items, start_cursor=start_cursor,
        )

    async def mute(self, user: UserLike) -> UserResponse:
        r = await self._http.post("/mutes/users/create.json", params=UserRef.of(user).to_params())
        return UserResponse.model_validate(r.json())

    async def unmute(self, user: UserLike) -> UserResponse:
        r = await self._http.post("/mutes/users/destroy.json", params=UserRef.of(user).to_params())
        return UserResponse.model_validate(r.json())

    # --- Suggestions ---

    async def get_suggested_categories(
        self, language: str | None = None
    ) -> list[SuggestionCategory]:
        params = {"lang": language} if language else None
        r = await self._http.get("/users/suggestions.json", params=params)
        return [SuggestionCategory.model_validate(c) for c in r.json()]

    async def get_suggested_users(
        self, slug: str, language: str | None = None
    ) -> list[UserResponse]:
        """Users suggested in the category ``slug`` (see :meth:`get_suggested_categories`)."""
        if not slug or "/" in slug:
            raise ValueError("slug must be a non-empty category slug")
        params = {"lang": language} if language else None
        r = await self._http.get(f"/users/suggestions/{slug}.json", params=params)
        return SuggestedUsers.model_validate(r.json()).users
