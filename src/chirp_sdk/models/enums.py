from enum import Enum


class ImageSize(str, Enum):
    normal = "normal"
    bigger = "bigger"
    mini = "mini"
    original = "original"


class Connection(str, Enum):
    following = "following"
    following_requested = "following_requested"
    followed_by = "followed_by"
    blocking = "blocking"
    muting = "muting"
    none = "none"
