"""Validation records and result handles.

``ValidationError`` is one recorded failure: a message plus a lookup
key. ``ValidationResult`` is what every check returns — a small handle
onto the record it just created (if any), so the caller can rename or
reword it in place::

    v.required(form.get("title")).key("title").message("Give it a title")

The handle never holds the record itself. It holds its owning
``Validation`` and a position in its error list, and all edits go
through ``Validation._replace``. After ``clear()`` the position no
longer means anything, so older handles go inert.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vouch.validation.engine import Validation


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failed check."""

    message: str
    key: str = ""

    def __str__(self) -> str:
        return self.message


class ValidationResult:
    """The outcome of a single check.

    ``ok`` is True when the check passed, and ``error`` is then
    ``None``. A failing result is falsy, so you can write::

        if not v.email(address):
            ...
    """

    __slots__ = ("_generation", "_index", "_owner", "ok")

    def __init__(
        self,
        ok: bool,
        owner: Validation | None = None,
        index: int = -1,
        generation: int = 0,
    ) -> None:
        self.ok = ok
        self._owner = owner
        self._index = index
        self._generation = generation

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @property
    def error(self) -> ValidationError | None:
        """The recorded failure, or ``None`` on success or a stale handle."""
        if self._owner is None:
            return None
        return self._owner._lookup(self._index, self._generation)

    def key(self, key: str) -> ValidationResult:
        """Set the lookup key of the recorded failure. No-op on success."""
        if self._owner is not None:
            self._owner._replace(self._index, self._generation, key=key)
        return self

    def message(self, message: str, *args: object) -> ValidationResult:
        """Replace the failure message. No-op on success.

        Positional *args* are substituted with ``str.format``::

            v.min_size(name, 3).message("At least {} letters", 3)

        With *args*, literal braces must be doubled (``"{{x}}"``);
        without them the message is used as-is.
        """
        if self._owner is not None:
            if args:
                message = message.format(*args)
            self._owner._replace(self._index, self._generation, message=message)
        return self

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return "ValidationResult(ok=True)"
        return f"ValidationResult(ok=False, error={self.error!r})"
