from chirp_sdk.models.base import ChirpModel
from chirp_sdk.models.users import UserResponse


class SuggestionCategory(ChirpModel):
    name: str
    slug: str
    size: int = 0


class SuggestedUsers(SuggestionCategory):
    users: list[UserResponse] = []
