"""Vouch — ad hoc field validation with collected, keyed errors.

Run checks against request data, keep going on failure, and look the
errors up by field afterwards.

Basic usage::

    from vouch import Validation

    v = Validation()
    v.required(form.get("title")).key("title")
    v.max_size(form.get("title", ""), 200).key("title")
    v.email(form.get("email", "")).key("email")

    if v.has_errors():
        errors = v.error_map()  # {"title": ValidationError(...), ...}

Request-scoped use::

    from vouch.context import validation_scope

    with validation_scope() as v:
        ...
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Validation",
    "ValidationConfig",
    "ValidationError",
    "ValidationFailed",
    "ValidationResult",
    "Validator",
    "VouchError",
    "get_validation",
    "validation_scope",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "vouch.errors",
    "Validation": "vouch.validation.engine",
    "ValidationConfig": "vouch.config",
    "ValidationError": "vouch.validation.result",
    "ValidationFailed": "vouch.errors",
    "ValidationResult": "vouch.validation.result",
    "Validator": "vouch.validation.rules",
    "VouchError": "vouch.errors",
    "get_validation": "vouch.context",
    "validation_scope": "vouch.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vouch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
