"""Test helpers for code that uses vouch.

Usage::

    from vouch.testing import assert_error, assert_valid

    def test_signup_rejects_blank_name():
        v = validate_signup({"name": ""})
        assert_error(v, "name", "Required")
"""

from vouch.testing.assertions import (
    assert_error,
    assert_invalid,
    assert_messages,
    assert_valid,
)

__all__ = [
    "assert_error",
    "assert_invalid",
    "assert_messages",
    "assert_valid",
]
