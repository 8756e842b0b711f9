"""Built-in validation rules.

Every rule implements the ``Validator`` protocol::

    class Rule:
        def is_satisfied(self, value: object) -> bool: ...
        def default_message(self) -> str: ...

Rules are frozen dataclasses. They hold their parameters and nothing
else, so an instance can be built per call and thrown away.

Values of an unexpected shape (``None``, the wrong type) are simply
not satisfied. A rule never raises for bad input.

Custom rules follow the same protocol — any object with those two
methods works with ``Validation.check()``::

    @dataclass(frozen=True, slots=True)
    class Even:
        def is_satisfied(self, value: object) -> bool:
            return isinstance(value, int) and value % 2 == 0

        def default_message(self) -> str:
            return "Must be even"
"""

from __future__ import annotations

import re
from collections.abc import Sized
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Protocol, runtime_checkable


@runtime_checkable
class Validator(Protocol):
    """A stateless rule that judges one value."""

    def is_satisfied(self, value: object) -> bool: ...
    def default_message(self) -> str: ...


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a meaningful quantity here
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        # Decimal isn't registered as Real, and NaN raises on ordering
        return not value.is_nan()
    return isinstance(value, Real)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required:
    """Value must be present and non-empty.

    ``None`` fails. Strings and other sized values must be non-empty,
    ``bool`` must be ``True`` and numbers must be non-zero. Dates and
    any other object pass.
    """

    def is_satisfied(self, value: object) -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if _is_number(value):
            return value != 0
        if isinstance(value, date):
            return True
        if isinstance(value, Sized):
            return len(value) > 0
        return True

    def default_message(self) -> str:
        return "Required"


# ---------------------------------------------------------------------------
# Numeric bounds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Min:
    """Number must be at least *minimum*."""

    minimum: int | float | Decimal

    def is_satisfied(self, value: object) -> bool:
        return _is_number(value) and value >= self.minimum

    def default_message(self) -> str:
        return f"Minimum is {self.minimum}"


@dataclass(frozen=True, slots=True)
class Max:
    """Number must be at most *maximum*."""

    maximum: int | float | Decimal

    def is_satisfied(self, value: object) -> bool:
        return _is_number(value) and value <= self.maximum

    def default_message(self) -> str:
        return f"Maximum is {self.maximum}"


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AllOf:
    """Every constituent rule must pass, checked in order.

    Evaluation stops at the first failing rule, and ``failure_message``
    reports that rule's message rather than a combined one.
    """

    rules: tuple[Validator, ...] = ()

    def first_failure(self, value: object) -> Validator | None:
        """Return the first constituent that rejects *value*, if any."""
        for rule in self.rules:
            if not rule.is_satisfied(value):
                return rule
        return None

    def is_satisfied(self, value: object) -> bool:
        return self.first_failure(value) is None

    def default_message(self) -> str:
        return "; ".join(rule.default_message() for rule in self.rules)


@dataclass(frozen=True, slots=True)
class Range(AllOf):
    """Number must lie within ``[low.minimum, high.maximum]``.

    Built from a ``Min`` and a ``Max``; failing either reports that
    bound's message (``Minimum is 1`` or ``Maximum is 5``).
    """

    low: Min
    high: Max
    rules: tuple[Validator, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", (self.low, self.high))

    @classmethod
    def between(cls, minimum: int | float | Decimal, maximum: int | float | Decimal) -> Range:
        """Shorthand for ``Range(Min(minimum), Max(maximum))``."""
        return cls(low=Min(minimum), high=Max(maximum))

    def default_message(self) -> str:
        return f"Range is {self.low.minimum} to {self.high.maximum}"


def failure_message(rule: Validator, value: object) -> str:
    """Message to record when *rule* rejects *value*.

    Composite rules report the constituent that actually failed;
    everything else reports its own default message.
    """
    if isinstance(rule, AllOf):
        failed = rule.first_failure(value)
        if failed is not None:
            return failure_message(failed, value)
    return rule.default_message()


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MinSize:
    """String or collection must have at least *size* items."""

    size: int

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, Sized) and len(value) >= self.size

    def default_message(self) -> str:
        return f"Minimum size is {self.size}"


@dataclass(frozen=True, slots=True)
class MaxSize:
    """String or collection must have at most *size* items."""

    size: int

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, Sized) and len(value) <= self.size

    def default_message(self) -> str:
        return f"Maximum size is {self.size}"


@dataclass(frozen=True, slots=True)
class Length:
    """String or collection must have exactly *size* items."""

    size: int

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, Sized) and len(value) == self.size

    def default_message(self) -> str:
        return f"Required length is {self.size}"


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Match:
    """String must contain a match for *pattern* (``re.search`` semantics).

    Anchor the pattern with ``^...\Z`` to require a full match (``$``
    also matches before a trailing newline). A string
    pattern is compiled once, on construction.
    """

    pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, str) and self.pattern.search(value) is not None

    def default_message(self) -> str:
        return f"Must match {self.pattern.pattern}"


# Structural check on the local part and domain labels, not deliverability.
# Ends in \Z so a trailing newline fails.
EMAIL_PATTERN = re.compile(
    r"^[\w!#$%&'*+/=?^`{|}~-]+(?:\.[\w!#$%&'*+/=?^`{|}~-]+)*"
    r"@(?:\w(?:[\w-]*\w)?\.)+[a-zA-Z0-9](?:[\w-]*\w)?\Z"
)


@dataclass(frozen=True, slots=True)
class Email(Match):
    """String must look like an email address."""

    pattern: re.Pattern[str] = EMAIL_PATTERN

    def default_message(self) -> str:
        return "Must be a valid email address"
