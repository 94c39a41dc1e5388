"""Friendship (relationship) API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from chirp_sdk.api.users import LOOKUP_BATCH_SIZE, UsersAPI
from chirp_sdk.identifiers import UserLike, UserRef, bulk_params
from chirp_sdk.models.friendships import RelationshipDetails, RelationshipState
from chirp_sdk.models.users import UserResponse

if TYPE_CHECKING:
    from chirp_sdk.http import HTTPClient


class FriendshipsAPI:
    def __init__(self, http: HTTPClient, users: UsersAPI | None = None) -> None:
        self._http = http
        self._users = users if users is not None else UsersAPI(http)

    async def get_relationship_between(
        self, source: UserLike, target: UserLike
    ) -> RelationshipDetails:
        params: dict[str, Any] = {
            **UserRef.of(source, "source").to_params("source"),
            **UserRef.of(target, "target").to_params("target"),
        }
        r = await self._http.get("/friendships/show.json", params=params)
        return RelationshipDetails.model_validate(r.json()["relationship"])

    async def get_relationships_with(self, users: Iterable[UserLike]) -> list[RelationshipState]:
        """Relationship of the authenticated user with each of up to 100 users."""
        params = bulk_params(users)
        if not params:
            raise ValueError("users cannot be empty")
        r = await self._http.get("/friendships/lookup.json", params=params)
        return [RelationshipState.model_validate(item) for item in r.json()]

    async def update_relationship(
        self,
        user: UserLike,
        *,
        retweets: bool | None = None,
        device: bool | None = None,
    ) -> RelationshipDetails:
        """Toggle retweets and device notifications for a followed user."""
        params: dict[str, Any] = UserRef.of(user).to_params()
        if retweets is not None:
            params["retweets"] = "true" if retweets else "false"
        if device is not None:
            params["device"] = "true" if device else "false"
        r = await self._http.post("/friendships/update.json", params=params)
        return RelationshipDetails.model_validate(r.json()["relationship"])

    async def get_user_ids_whose_retweets_are_muted(self) -> list[int]:
        r = await self._http.get("/friendships/no_retweets/ids.json")
        return [int(i) for i in r.json()]

    async def get_users_whose_retweets_are_muted(self) -> list[UserResponse]:
        ids = await self.get_user_ids_whose_retweets_are_muted()
        return await self._users.lookup(ids)

    async def get_relationship_states_with(
        self, users: Iterable[UserResponse]
    ) -> dict[int, RelationshipState | None]:
        """Relationship of the authenticated user with each fetched user, keyed by user id.

        Users the server reports nothing for map to None.
        """
        targets = list(users)
        if not targets:
            raise ValueError("users cannot be empty")
        states: list[RelationshipState] = []
        for start in range(0, len(targets), LOOKUP_BATCH_SIZE):
            batch = targets[start:start + LOOKUP_BATCH_SIZE]
            states.extend(await self.get_relationships_with([u.id for u in batch]))

        by_id = {s.id: s for s in states}
        by_name = {s.screen_name.lower(): s for s in states}
        return {
            u.id: by_id.get(u.id) or by_name.get(u.screen_name.lower())
            for u in targets
        }
