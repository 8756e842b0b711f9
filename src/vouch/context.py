"""Session-scoped validation via ContextVar.

Provides:
- ``validation_var``: The current ``Validation`` for this task/thread.
- ``validation_scope()``: Installs a fresh context for one request.
- ``get_validation()``: Reads it back from anywhere in that request.

Opt-in — if nothing sets the variable, ``get_validation()`` raises
``LookupError``.

Errors from a context marked with ``keep()`` can be handed to the
next scope (the redirect-after-POST flash pattern)::

    with validation_scope() as v:
        v.required(form.get("name")).key("name")
        if v.has_errors():
            v.keep()
            session["validation"] = v
            return redirect("/form")

    # next request
    with validation_scope(previous=session.pop("validation", None)) as v:
        errors = v.error_map()  # still has "name"

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed, but a single ``Validation`` must not be
    shared between threads.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from vouch.config import ValidationConfig
from vouch.validation.engine import Validation

validation_var: ContextVar[Validation] = ContextVar("vouch_validation")
"""The current validation context. Set by ``validation_scope()``."""


def get_validation() -> Validation:
    """Return the current validation context.

    Raises ``LookupError`` if called outside ``validation_scope()``.
    """
    return validation_var.get()


@contextmanager
def validation_scope(
    previous: Validation | None = None,
    config: ValidationConfig | None = None,
) -> Iterator[Validation]:
    """Install a fresh ``Validation`` for the duration of the block.

    If *previous* was marked with ``keep()``, its errors are copied into
    the new context. Otherwise they are dropped. *config* defaults to
    the previous context's config, then to ``ValidationConfig()``.
    """
    if config is None and previous is not None:
        config = previous.config
    validation = Validation(config=config)
    if previous is not None and previous.kept:
        validation.extend(previous.errors)

    token = validation_var.set(validation)
    try:
        yield validation
    finally:
        validation_var.reset(token)
