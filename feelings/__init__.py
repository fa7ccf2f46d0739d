# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""feelings - a declarative object-shape validator.

.. code-block:: python

    from feelings import validate

    errors = validate({"email": {"required": True, "matches": r"@"}}, payload)
    if errors:
        ...
"""

from .exceptions import (
    ConfigurationError,
    FeelingsError,
    UnknownConstraintError,
    ValidationError,
)
from .runtime import assert_valid, check, get_registry, get_validator, validate
from .schemas import SchemaBundle, load_schema_file, parse_schema
from .validation import (
    Constraint,
    ConstraintRegistry,
    FieldViolation,
    ValidationResult,
    Validator,
    format_errors,
)

# The shared, extensible registry used by ``validate``.
constraints = get_registry()

__version__ = "0.2.0"

__all__ = [
    "ConfigurationError",
    "Constraint",
    "ConstraintRegistry",
    "FeelingsError",
    "FieldViolation",
    "SchemaBundle",
    "UnknownConstraintError",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "assert_valid",
    "check",
    "constraints",
    "format_errors",
    "get_registry",
    "get_validator",
    "load_schema_file",
    "parse_schema",
    "validate",
]
