from enum import IntEnum

from chirp_sdk.models.base import ChirpModel


class ErrorCode(IntEnum):
    COULD_NOT_AUTHENTICATE = 32
    PAGE_NOT_FOUND = 34
    USER_NOT_FOUND = 50
    USER_SUSPENDED = 63
    RATE_LIMIT_EXCEEDED = 88
    INVALID_TOKEN = 89
    OVER_CAPACITY = 130
    INTERNAL_ERROR = 131
    TIMESTAMP_OUT_OF_BOUNDS = 135
    FOLLOW_LIMIT_REACHED = 161
    BLOCKED_FROM_FOLLOWING = 162
    NOT_AUTHORIZED = 179
    BAD_AUTHENTICATION_DATA = 215
    ACCOUNT_LOCKED = 326


class ErrorResponse(ChirpModel):
    code: int
    message: str = ""
