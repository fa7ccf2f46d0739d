# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Custom exceptions for the feelings validator."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class FeelingsError(Exception):
    """Base class for all errors raised by feelings."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(FeelingsError):
    """Raised when a schema or the constraint registry is misconfigured.

    This always signals a bug in schema authoring, never bad input data, so
    it aborts the whole validation call instead of being reported per field.
    """


class UnknownConstraintError(ConfigurationError):
    """Raised when a constraint set names a constraint missing from the registry."""

    def __init__(self, constraint: str, field: Optional[str] = None):
        self.constraint = constraint
        self.field = field
        message = f'Unknown constraint "{constraint}"'
        if field:
            message += f" on field '{field}'"
        super().__init__(message)


class ValidationError(FeelingsError):
    """Raised on request when data does not satisfy its schema.

    ``validate()`` never raises this; it is produced by ``assert_valid()`` and
    ``ValidationResult.raise_for_errors()`` for callers that prefer exceptions.
    """

    def __init__(self, errors: Mapping[str, Any], message: Optional[str] = None):
        self.errors = errors
        if message is None:
            from .validation.base import format_errors

            message = format_errors(errors)
        super().__init__(message)


__all__ = [
    "FeelingsError",
    "ConfigurationError",
    "UnknownConstraintError",
    "ValidationError",
]
