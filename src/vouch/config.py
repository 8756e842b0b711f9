"""Validation configuration.

ValidationConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass

from vouch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation context configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(auto_key=False)
        v = Validation(config=config)
    """

    # Default keys
    auto_key: bool = True  # Derive a key from the calling frame on failure
    key_separator: str = "#"  # Between function name and line number
    qualified_keys: bool = True  # Prefix the module name to the function name

    # Diagnostics
    log_key_failures: bool = True  # Log when the calling frame can't be found

    def __post_init__(self) -> None:
        if not self.key_separator:
            msg = "key_separator must be a non-empty string"
            raise ConfigurationError(msg)
