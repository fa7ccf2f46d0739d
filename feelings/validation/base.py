# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by the validator and its callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from ..exceptions import ValidationError

# A field error is either a message or, for nested schemas, another error mapping.
FieldError = Union[str, Dict[str, Any]]
ErrorResult = Optional[Dict[str, FieldError]]

REQUIRED_MESSAGE = "This field is required"
UNKNOWN_FIELD_MESSAGE = "Unknown field"


@dataclass(frozen=True)
class FieldViolation:
    """A single leaf error, addressed by its dotted field path."""

    path: str
    message: str


def iter_violations(errors: Optional[Mapping[str, Any]], prefix: str = "") -> Iterator[FieldViolation]:
    """Flatten a (possibly nested) error mapping into leaf violations."""

    if not errors:
        return
    for name, error in errors.items():
        path = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(error, Mapping):
            yield from iter_violations(error, path)
        else:
            yield FieldViolation(path=path, message=str(error))


def format_errors(errors: Optional[Mapping[str, Any]]) -> str:
    """Produce a human-readable summary of an error mapping."""

    lines = ["Validation failed:"]
    for violation in iter_violations(errors):
        lines.append(f" - {violation.path}: {violation.message}")
    return "\n".join(lines)


@dataclass
class ValidationResult:
    """Outcome of a validation call.

    ``errors`` is ``None`` for valid data, otherwise the field -> error mapping
    returned by ``Validator.validate``.
    """

    errors: ErrorResult = None
    violations: List[FieldViolation] = field(init=False, repr=False)

    def __post_init__(self):
        self.violations = list(iter_violations(self.errors))

    @property
    def valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)


__all__ = [
    "ErrorResult",
    "FieldError",
    "FieldViolation",
    "REQUIRED_MESSAGE",
    "UNKNOWN_FIELD_MESSAGE",
    "ValidationResult",
    "format_errors",
    "iter_violations",
]
