"""Validation context — applies rules and collects failures.

A ``Validation`` lives for one session: one request, one object to
validate. Every check funnels through ``_apply``, which runs the rule,
records a ``ValidationError`` on failure and hands back a
``ValidationResult``::

    v = Validation()
    v.required(form.get("name")).key("name")
    v.check(form.get("age"), Required(), Range.between(18, 120)).key("age")
    v.email(form.get("email", ""))

    if v.has_errors():
        return render(errors=v.error_map())

Failures without an explicit ``.key()`` are keyed by call site (see
``vouch._internal.callsite``).

Not thread-safe. Create one context per request or task.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import replace
from decimal import Decimal
from typing import TypeAlias

from vouch._internal.callsite import call_site_key
from vouch.config import ValidationConfig
from vouch.errors import ValidationFailed
from vouch.validation.result import ValidationError, ValidationResult
from vouch.validation.rules import (
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

Number: TypeAlias = int | float | Decimal

logger = logging.getLogger("vouch.validation")

# Frames from these modules are plumbing, never the code being keyed
_INTERNAL_MODULES = frozenset({__name__, "vouch._internal.callsite"})


class Validation:
    """Collects validation errors for one session."""

    __slots__ = ("_config", "_errors", "_generation", "_kept")

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()
        self._errors: list[ValidationError] = []
        self._generation = 0
        self._kept = False

    @property
    def config(self) -> ValidationConfig:
        return self._config

    @property
    def errors(self) -> list[ValidationError]:
        """Recorded failures, oldest first. A copy; edit through results."""
        return list(self._errors)

    @property
    def kept(self) -> bool:
        """True once ``keep()`` has been called."""
        return self._kept

    # -- Session state --

    def keep(self) -> None:
        """Ask the host to carry these errors over to the next request.

        Only sets a flag. The context never reads it; the host (see
        ``vouch.context.validation_scope``) does.
        """
        self._kept = True

    def clear(self) -> None:
        """Drop every recorded error. Results handed out earlier go inert."""
        self._errors = []
        self._generation += 1

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def error_map(self) -> dict[str, ValidationError]:
        """Return the errors mapped by key.

        If several errors share a key, the first one wins (typically the
        first check on a field is the more basic one).
        """
        m: dict[str, ValidationError] = {}
        for e in self._errors:
            m.setdefault(e.key, e)
        return m

    def field_errors(self) -> dict[str, list[str]]:
        """Return every message grouped by key, in insertion order.

        Same shape as form-template error dicts::

            {"title": ["Required"], "email": ["Must be a valid email address"]}
        """
        grouped: dict[str, list[str]] = {}
        for e in self._errors:
            grouped.setdefault(e.key, []).append(e.message)
        return grouped

    def raise_if_errors(self) -> None:
        """Raise ``ValidationFailed`` if any error was recorded."""
        if self._errors:
            raise ValidationFailed(errors=tuple(self._errors))

    def extend(self, errors: Iterable[ValidationError]) -> None:
        """Append already-built errors, e.g. ones kept from a prior request."""
        self._errors.extend(errors)

    # -- Direct injection --

    def error(self, message: str, *args: object) -> ValidationResult:
        """Record a failure that no rule produced.

        For cross-field or business checks. The error is recorded right
        away with an empty key; name it with ``.key()``::

            if form["password"] != form["confirm"]:
                v.error("Passwords don't match").key("confirm")

        Positional *args* are substituted with ``str.format``, so literal
        braces must then be doubled (``"{{x}}"``).
        """
        if args:
            message = message.format(*args)
        return self._record(ValidationError(message=message))

    # -- Built-in rules --

    def required(self, obj: object) -> ValidationResult:
        """Test that *obj* is not ``None`` and not empty."""
        return self._apply(Required(), obj)

    def min(self, n: Number, minimum: Number) -> ValidationResult:
        return self._apply(Min(minimum), n)

    def max(self, n: Number, maximum: Number) -> ValidationResult:
        return self._apply(Max(maximum), n)

    def range(self, n: Number, minimum: Number, maximum: Number) -> ValidationResult:
        return self._apply(Range(Min(minimum), Max(maximum)), n)

    def min_size(self, obj: object, size: int) -> ValidationResult:
        return self._apply(MinSize(size), obj)

    def max_size(self, obj: object, size: int) -> ValidationResult:
        return self._apply(MaxSize(size), obj)

    def length(self, obj: object, size: int) -> ValidationResult:
        return self._apply(Length(size), obj)

    def match(self, text: str, pattern: re.Pattern[str] | str) -> ValidationResult:
        return self._apply(Match(pattern), text)

    def email(self, text: str) -> ValidationResult:
        return self._apply(Email(), text)

    def check(self, obj: object, *checks: Validator) -> ValidationResult | None:
        """Apply *checks* to *obj* in order, stopping at the first failure.

        Returns the failing result, or the last passing one. With no
        checks there is nothing to report and the result is ``None``.
        """
        result: ValidationResult | None = None
        for chk in checks:
            result = self._apply(chk, obj)
            if not result.ok:
                return result
        return result

    # -- Internals --

    def _apply(self, chk: Validator, obj: object) -> ValidationResult:
        if chk.is_satisfied(obj):
            return ValidationResult.success()
        return self._record(
            ValidationError(message=failure_message(chk, obj), key=self._default_key())
        )

    def _default_key(self) -> str:
        if not self._config.auto_key:
            return ""
        key = call_site_key(
            _INTERNAL_MODULES,
            separator=self._config.key_separator,
            qualified=self._config.qualified_keys,
        )
        if key is None:
            if self._config.log_key_failures:
                logger.info("Failed to get caller information to look up validation key")
            return ""
        return key

    def _record(self, err: ValidationError) -> ValidationResult:
        self._errors.append(err)
        return ValidationResult(
            ok=False,
            owner=self,
            index=len(self._errors) - 1,
            generation=self._generation,
        )

    def _lookup(self, index: int, generation: int) -> ValidationError | None:
        if generation != self._generation:
            return None
        return self._errors[index]

    def _replace(self, index: int, generation: int, **changes: str) -> None:
        if generation != self._generation:
            logger.debug("Ignoring edit to validation error cleared from context")
            return
        self._errors[index] = replace(self._errors[index], **changes)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(list(self._errors))

    def __repr__(self) -> str:
        return f"<Validation errors={len(self._errors)} kept={self._kept}>"
