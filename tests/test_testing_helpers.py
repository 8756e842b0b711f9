"""Tests for vouch.testing — validation assertion helpers."""

import pytest

from vouch.testing import assert_error, assert_invalid, assert_messages, assert_valid
from vouch.validation import Validation


def _invalid() -> Validation:
    v = Validation()
    v.required("").key("name")
    v.email("nope").key("email")
    return v


class TestAssertValid:
    def test_passes_when_clean(self) -> None:
        assert_valid(Validation())

    def test_fails_with_errors(self) -> None:
        with pytest.raises(AssertionError, match="'name': 'Required'"):
            assert_valid(_invalid())


class TestAssertInvalid:
    def test_passes_with_errors(self) -> None:
        assert_invalid(_invalid())

    def test_count(self) -> None:
        assert_invalid(_invalid(), count=2)

    def test_wrong_count(self) -> None:
        with pytest.raises(AssertionError, match="Expected 3 validation errors, got 2"):
            assert_invalid(_invalid(), count=3)

    def test_fails_when_clean(self) -> None:
        with pytest.raises(AssertionError, match="got none"):
            assert_invalid(Validation())


class TestAssertError:
    def test_key_present(self) -> None:
        assert_error(_invalid(), "name")

    def test_key_and_message(self) -> None:
        assert_error(_invalid(), "email", "Must be a valid email address")

    def test_missing_key(self) -> None:
        with pytest.raises(AssertionError, match="No validation error for key 'age'"):
            assert_error(_invalid(), "age")

    def test_wrong_message(self) -> None:
        with pytest.raises(AssertionError, match="Expected message"):
            assert_error(_invalid(), "name", "Name is required")


class TestAssertMessages:
    def test_exact_order(self) -> None:
        assert_messages(_invalid(), "Required", "Must be a valid email address")

    def test_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Expected messages"):
            assert_messages(_invalid(), "Must be a valid email address", "Required")
