# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide default validator and module-level entry points.

The default validator's registry is shared by every caller of
:func:`validate`. Register custom constraints on it during start-up, before
validation calls run concurrently; use a dedicated :class:`Validator` with its
own registry when isolated configuration is needed.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

from ..validation import ConstraintRegistry, ValidationResult, Validator
from ..validation.base import ErrorResult

_VALIDATOR: Final[Validator] = Validator()


def get_validator() -> Validator:
    """Return the process-wide validator instance."""

    return _VALIDATOR


def get_registry() -> ConstraintRegistry:
    """Return the constraint registry used by the process-wide validator."""

    return _VALIDATOR.registry


def validate(schema: Mapping[str, Any], data: Mapping[str, Any]) -> ErrorResult:
    """Validate *data* against *schema* with the process-wide validator."""

    return _VALIDATOR.validate(schema, data)


def check(schema: Mapping[str, Any], data: Mapping[str, Any]) -> ValidationResult:
    return _VALIDATOR.check(schema, data)


def assert_valid(schema: Mapping[str, Any], data: Mapping[str, Any]) -> None:
    _VALIDATOR.assert_valid(schema, data)


__all__ = [
    "assert_valid",
    "check",
    "get_registry",
    "get_validator",
    "validate",
]
