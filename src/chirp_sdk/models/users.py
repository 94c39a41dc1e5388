from chirp_sdk.models.base import ChirpModel


class UserResponse(ChirpModel):
    id: int
    id_str: str | None = None
    screen_name: str
    name: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    protected: bool = False
    verified: bool = False
    followers_count: int = 0
    friends_count: int = 0
    statuses_count: int = 0
    created_at: str | None = None
    profile_image_url_https: str | None = None
    profile_banner_url: str | None = None
    email: str | None = None
