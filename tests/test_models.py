"""Tests for SDK response models."""

from chirp_sdk.models.cursors import CursorResponse
from chirp_sdk.models.enums import Connection
from chirp_sdk.models.errors import ErrorCode, ErrorResponse
from chirp_sdk.models.friendships import RelationshipState
from chirp_sdk.models.users import UserResponse


class TestUserModels:
    def test_minimal_user(self):
        u = UserResponse.model_validate({"id": 1, "screen_name": "ann"})
        assert u.id == 1
        assert u.protected is False
        assert u.followers_count == 0

    def test_unknown_fields_ignored(self):
        u = UserResponse.model_validate({
            "id": 1, "screen_name": "ann", "entities": {"url": {}}, "status": {"text": "hi"},
        })
        assert not hasattr(u, "entities")


class TestCursorModels:
    def test_large_cursor(self):
        r = CursorResponse.model_validate({
            "ids": [1, 2], "next_cursor": 1489467234237774933, "previous_cursor": 0,
            "next_cursor_str": "1489467234237774933",
        })
        assert r.next_cursor == 1489467234237774933
        assert r.previous_cursor == 0

    def test_defaults(self):
        r = CursorResponse.model_validate({"users": []})
        assert r.next_cursor == 0


class TestRelationshipState:
    def test_connections(self):
        s = RelationshipState.model_validate({
            "id": 2, "screen_name": "b", "connections": ["following_requested", "muting"],
        })
        assert s.connections == [Connection.following_requested, Connection.muting]
        assert s.following_requested
        assert s.muting
        assert not s.blocking


class TestErrorModels:
    def test_error_response(self):
        e = ErrorResponse.model_validate({"code": 88, "message": "Rate limit exceeded"})
        assert ErrorCode(e.code) is ErrorCode.RATE_LIMIT_EXCEEDED
