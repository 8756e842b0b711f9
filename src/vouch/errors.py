"""Vouch exception hierarchy.

Validation failures are data (``ValidationError`` records on a
``Validation`` context), not exceptions. The types here cover the
few cases that do raise: bad configuration, and callers that opt in
to treating accumulated failures as fatal via ``raise_if_errors()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vouch.validation.result import ValidationError


class VouchError(Exception):
    """Base for all vouch-specific errors."""


class ConfigurationError(VouchError):
    """Raised when a ``ValidationConfig`` is invalid."""


@dataclass(frozen=True, slots=True)
class ValidationFailed(VouchError):
    """Raised by ``Validation.raise_if_errors()`` when errors exist.

    Carries a snapshot of the errors at the time of raising, so later
    ``clear()`` calls on the context don't change what was reported.
    """

    errors: tuple[ValidationError, ...] = ()

    def __str__(self) -> str:
        if not self.errors:
            return "Validation failed"
        return "; ".join(e.message for e in self.errors)
