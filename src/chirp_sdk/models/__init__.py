"""SDK response models."""

from chirp_sdk.models.base import ChirpModel
from chirp_sdk.models.errors import ErrorCode, ErrorResponse

from chirp_sdk.models.account import AccountSettings, SleepTime, TimeZone, TrendLocation
from chirp_sdk.models.cursors import CursorResponse
from chirp_sdk.models.enums import Connection, ImageSize
from chirp_sdk.models.friendships import RelationshipDetails, RelationshipSide, RelationshipState
from chirp_sdk.models.suggestions import SuggestedUsers, SuggestionCategory
from chirp_sdk.models.users import UserResponse

__all__ = [
    "ChirpModel",
    "ErrorCode",
    "ErrorResponse",
    # enums
    "Connection",
    "ImageSize",
    # account
    "AccountSettings",
    "SleepTime",
    "TimeZone",
    "TrendLocation",
    # cursors
    "CursorResponse",
    # friendships
    "RelationshipDetails",
    "RelationshipSide",
    "RelationshipState",
    # suggestions
    "SuggestedUsers",
    "SuggestionCategory",
    # users
    "UserResponse",
]
