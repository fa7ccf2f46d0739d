"""Runtime helpers - the process-wide validator."""

from .validation import assert_valid, check, get_registry, get_validator, validate

__all__ = [
    "assert_valid",
    "check",
    "get_registry",
    "get_validator",
    "validate",
]
