"""User references: a user named either by numeric id or by screen name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


def _id_problem(user_id: object) -> str | None:
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        return "id must be a positive integer"
    return None


def _name_problem(screen_name: object) -> str | None:
    if not isinstance(screen_name, str):
        return "screen name must be a string"
    if not screen_name or screen_name != screen_name.strip() or screen_name.startswith("@"):
        return "screen name cannot be empty, padded or @-prefixed"
    return None


@dataclass(frozen=True)
class UserRef:
    """Exactly one of ``user_id`` or ``screen_name`` is set."""

    user_id: int | None = None
    screen_name: str | None = None

    def __post_init__(self) -> None:
        if (self.user_id is None) == (self.screen_name is None):
            raise ValueError("UserRef needs exactly one of user_id or screen_name")
        if self.user_id is not None:
            problem = _id_problem(self.user_id)
        else:
            problem = _name_problem(self.screen_name)
        if problem:
            raise ValueError(f"user is not valid: {problem}")

    @classmethod
    def by_id(cls, user_id: int, name: str = "user") -> UserRef:
        problem = _id_problem(user_id)
        if problem:
            raise ValueError(f"{name} is not valid: {problem}")
        return cls(user_id=user_id)

    @classmethod
    def by_screen_name(cls, screen_name: str, name: str = "user") -> UserRef:
        if isinstance(screen_name, str):
            screen_name = screen_name.strip().lstrip("@")
        problem = _name_problem(screen_name)
        if problem:
            raise ValueError(f"{name} is not valid: {problem}")
        return cls(screen_name=screen_name)

    @classmethod
    def of(cls, user: UserLike, name: str = "user") -> UserRef:
        """Coerce an id, a screen name or an existing reference."""
        if user is None:
            raise ValueError(f"{name} cannot be None")
        if isinstance(user, UserRef):
            return user
        if isinstance(user, str):
            return cls.by_screen_name(user, name)
        return cls.by_id(user, name)

    def to_params(self, prefix: str = "") -> dict[str, str | int]:
        """Query parameters naming this user.

        With no prefix: ``user_id`` / ``screen_name``. With a prefix such as
        ``source`` or ``target``: ``source_id`` / ``source_screen_name``.
        """
        if prefix:
            id_key, name_key = f"{prefix}_id", f"{prefix}_screen_name"
        else:
            id_key, name_key = "user_id", "screen_name"
        if self.user_id is not None:
            return {id_key: self.user_id}
        return {name_key: self.screen_name}  # type: ignore[dict-item]

    def __str__(self) -> str:
        if self.user_id is not None:
            return str(self.user_id)
        return f"@{self.screen_name}"


UserLike = Union[int, str, UserRef]


def bulk_params(users: Iterable[UserLike], *, limit: int = 100) -> dict[str, str]:
    """Comma-joined ``user_id`` / ``screen_name`` parameters for lookup endpoints."""
    refs = [UserRef.of(u, "users") for u in users]
    if len(refs) > limit:
        raise ValueError(f"At most {limit} users can be looked up per request, got {len(refs)}")
    ids = [str(r.user_id) for r in refs if r.user_id is not None]
    names = [r.screen_name for r in refs if r.screen_name is not None]
    params: dict[str, str] = {}
    if ids:
        params["user_id"] = ",".join(ids)
    if names:
        params["screen_name"] = ",".join(names)
    return params
