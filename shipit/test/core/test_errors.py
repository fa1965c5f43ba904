"""Tests for shipit.core.errors module."""

from shipit.core.errors import ErrorCode


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert [int(c) for c in ErrorCode] == [0, 1, 2, 3, 4]
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.VERIFY_ERROR == 4
