"""Validation package - schema and constraint checking.

This package provides pure validation (constraint checking) for data objects.
No transformation or coercion happens here.
"""

from .base import FieldViolation, ValidationResult, format_errors, iter_violations
from .constraints import Constraint, ConstraintRegistry
from .validator import Validator

__all__ = [
    "Constraint",
    "ConstraintRegistry",
    "FieldViolation",
    "ValidationResult",
    "Validator",
    "format_errors",
    "iter_violations",
]
