"""Call-site identity for default validation keys.

A failed check with no explicit key is named after the code that ran
it: the function enclosing the call into ``Validation`` and the line
of that call, e.g. ``app.forms.signup#42``.

The lookup walks outward from the current frame and skips every
frame whose module is listed in *internal*. That makes the result
independent of how many engine frames sit in between (``required()``
calls ``_apply`` directly, ``check()`` loops first), so there is no
fixed stack depth to keep in sync.
"""

import inspect
from types import FrameType


def call_site_key(
    internal: frozenset[str],
    *,
    separator: str = "#",
    qualified: bool = True,
) -> str | None:
    """Return the key for the first frame outside *internal* modules.

    Returns ``None`` when the interpreter doesn't expose frames or no
    outside frame exists.
    """
    frame: FrameType | None = inspect.currentframe()
    try:
        while frame is not None and frame.f_globals.get("__name__") in internal:
            frame = frame.f_back
        if frame is None:
            return None
        return frame_key(frame, separator=separator, qualified=qualified)
    finally:
        # Break the frame reference cycle
        del frame


def frame_key(frame: FrameType, *, separator: str = "#", qualified: bool = True) -> str:
    """Format ``module.qualname#line`` for *frame*."""
    name = frame.f_code.co_qualname
    if qualified:
        module = frame.f_globals.get("__name__", "")
        if module:
            name = f"{module}.{name}"
    return f"{name}{separator}{frame.f_lineno}"
