"""Tests for the signup example — field checks and kept errors across a redirect."""

from vouch.context import validation_scope
from vouch.testing import assert_error, assert_valid

_GOOD = {
    "username": "alice_1",
    "email": "alice@example.com",
    "age": "30",
    "password": "correct horse",
    "confirm": "correct horse",
}


class TestValidateSignup:
    def test_valid_form(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup(_GOOD)
        assert_valid(v)

    def test_username_chain_stops_at_first_failure(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "username": ""})
        assert v.field_errors()["username"] == ["Required"]

    def test_username_pattern(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "username": "Alice!"})
        assert_error(v, "username", f"Must match {example_module.USERNAME_RE}")

    def test_age_range(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "age": "7"})
        assert_error(v, "age", "Minimum is 13")

    def test_age_not_a_number(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "age": "old"})
        assert_error(v, "age", "Age must be a whole number")

    def test_password_mismatch(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "confirm": "other"})
        assert_error(v, "confirm", "Passwords don't match")

    def test_short_password_custom_message(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "password": "short", "confirm": "short"})
        assert_error(v, "password", "Use at least 8 characters")

    def test_email_first_error_wins(self, example_module) -> None:
        with validation_scope() as v:
            example_module.validate_signup({**_GOOD, "email": ""})
        assert_error(v, "email", "Required")
        assert v.field_errors()["email"] == ["Required", "Must be a valid email address"]


class TestSubmitFlow:
    def test_success_redirects_to_user(self, example_module) -> None:
        session: dict[str, object] = {}
        assert example_module.submit(_GOOD, session) == "/users/alice_1"
        assert session == {}

    def test_failure_keeps_errors_for_next_request(self, example_module) -> None:
        session: dict[str, object] = {}
        assert example_module.submit({**_GOOD, "email": "nope"}, session) == "/signup"
        errors = example_module.show_form(session)
        assert errors == {"email": ["Must be a valid email address"]}
        assert "validation" not in session

    def test_duplicate_username(self, example_module) -> None:
        example_module.submit(_GOOD, {})
        session: dict[str, object] = {}
        example_module.submit(_GOOD, session)
        assert example_module.show_form(session) == {"username": ["alice_1 is already taken"]}

    def test_clean_form_has_no_errors(self, example_module) -> None:
        assert example_module.show_form({}) == {}


class TestLogging:
    def test_rejection_logged_with_fields(self, example_module, caplog) -> None:
        example_module.submit({**_GOOD, "email": "nope"}, {})
        assert "Signup rejected: ['email']" in caplog.text
