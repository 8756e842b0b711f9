"""Validation — ad hoc checks, collected errors, chainable results.

Usage::

    from vouch.validation import Validation

    def signup(form):
        v = Validation()
        v.required(form.get("name")).key("name")
        v.email(form.get("email", "")).key("email")
        v.min_size(form.get("password", ""), 8).key("password")
        if v.has_errors():
            return render("signup.html", errors=v.error_map())
"""

from vouch.validation.engine import Validation
from vouch.validation.result import ValidationError, ValidationResult
from vouch.validation.rules import (
    EMAIL_PATTERN,
    AllOf,
    Email,
    Length,
    Match,
    Max,
    MaxSize,
    Min,
    MinSize,
    Range,
    Required,
    Validator,
    failure_message,
)

__all__ = [
    "EMAIL_PATTERN",
    "AllOf",
    "Email",
    "Length",
    "Match",
    "Max",
    "MaxSize",
    "Min",
    "MinSize",
    "Range",
    "Required",
    "Validation",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "failure_message",
]
