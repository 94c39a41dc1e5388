from chirp_sdk.models.base import ChirpModel


class CursorResponse(ChirpModel):
    """Cursor fields shared by every cursored listing body."""

    next_cursor: int = 0
    previous_cursor: int = 0
