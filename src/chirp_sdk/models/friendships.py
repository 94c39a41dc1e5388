from chirp_sdk.models.base import ChirpModel
from chirp_sdk.models.enums import Connection


class RelationshipSide(ChirpModel):
    id: int
    id_str: str | None = None
    screen_name: str
    following: bool = False
    followed_by: bool = False
    following_requested: bool | None = None
    following_received: bool | None = None
    blocking: bool | None = None
    blocked_by: bool | None = None
    muting: bool | None = None
    want_retweets: bool | None = None
    notifications_enabled: bool | None = None
    can_dm: bool | None = None
    all_replies: bool | None = None
    marked_spam: bool | None = None


class RelationshipDetails(ChirpModel):
    source: RelationshipSide
    target: RelationshipSide


class RelationshipState(ChirpModel):
    """One row of a bulk relationship lookup."""

    id: int
    id_str: str | None = None
    screen_name: str
    name: str | None = None
    connections: list[Connection] = []

    @property
    def following(self) -> bool:
        return Connection.following in self.connections

    @property
    def followed_by(self) -> bool:
        return Connection.followed_by in self.connections

    @property
    def following_requested(self) -> bool:
        return Connection.following_requested in self.connections

    @property
    def blocking(self) -> bool:
        return Connection.blocking in self.connections

    @property
    def muting(self) -> bool:
        return Connection.muting in self.connections
