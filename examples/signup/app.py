"""Signup — field checks, cross-field errors, and kept errors across a redirect.

A framework-free take on the POST/redirect/GET form flow. ``submit()``
validates the posted form; on failure it keeps the errors and stores the
context in the session, and the next ``show_form()`` picks them up.

Run:
    python app.py
"""

import logging
from dataclasses import dataclass
from typing import Any

from vouch import Validation
from vouch.context import get_validation, validation_scope
from vouch.validation import Match, MinSize, Required

logger = logging.getLogger("vouch.examples.signup")

USERNAME_RE = r"^[a-z0-9_]+$"

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class User:
    username: str
    email: str
    age: int


_users: dict[str, User] = {}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_signup(form: dict[str, str]) -> Validation:
    """Run every signup check against the current validation context."""
    v = get_validation()

    username = form.get("username", "")
    v.check(username, Required(), MinSize(3), Match(USERNAME_RE)).key("username")
    if username in _users:
        v.error("{} is already taken", username).key("username")

    v.required(form.get("email")).key("email")
    v.email(form.get("email", "")).key("email")

    age = form.get("age", "")
    if age.isdigit():
        v.range(int(age), 13, 120).key("age")
    else:
        v.error("Age must be a whole number").key("age")

    if form.get("password", "") != form.get("confirm", ""):
        v.error("Passwords don't match").key("confirm")
    v.min_size(form.get("password", ""), 8).message("Use at least {} characters", 8).key("password")
    return v


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def submit(form: dict[str, str], session: dict[str, Any]) -> str:
    """Handle a POST. Returns the path to redirect to."""
    with validation_scope() as v:
        validate_signup(form)
        if v.has_errors():
            logger.info("Signup rejected: %s", sorted(v.error_map()))
            v.keep()
            session["validation"] = v
            return "/signup"

    user = User(username=form["username"], email=form["email"], age=int(form["age"]))
    _users[user.username] = user
    return f"/users/{user.username}"


def show_form(session: dict[str, Any]) -> dict[str, list[str]]:
    """Handle the GET after a redirect. Returns field errors to render."""
    with validation_scope(previous=session.pop("validation", None)) as v:
        return v.field_errors()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    session: dict[str, Any] = {}
    bad = {"username": "A!", "email": "nope", "age": "7", "password": "x", "confirm": "y"}
    print(submit(bad, session))
    for field, messages in show_form(session).items():
        print(f"{field}: {', '.join(messages)}")
