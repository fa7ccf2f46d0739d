# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema validation - checks data objects against declarative constraint sets.

A schema maps field names to constraint sets; a constraint set maps constraint
names (looked up in a ``ConstraintRegistry``) to their parameters:

.. code-block:: python

    validator = Validator()
    errors = validator.validate(
        {
            "name": {"required": True, "type": str, "max_length": 64},
            "age": {"type": int, "min": 0, "max": 150},
            "tags": {"items": {"type": str}},
        },
        {"name": "Alice", "age": 200},
    )
    assert errors == {"age": "Must be less than or equal to 150"}

Validation happens in two phases. The whole schema is first checked for
configuration errors (unknown constraint names, parameters of the wrong type);
any such error raises ``ConfigurationError`` and aborts the call. Data is then
evaluated field by field, each field stopping at its first failing constraint.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, Mapping, Optional

from opentelemetry.trace import Status, StatusCode

from ..exceptions import ConfigurationError, UnknownConstraintError
from ..telemetry import get_tracer, record_config_error, record_validation_metrics
from .base import (
    REQUIRED_MESSAGE,
    UNKNOWN_FIELD_MESSAGE,
    ErrorResult,
    ValidationResult,
)
from .constraints import (
    NESTED_CONSTRAINT_SET,
    NESTED_SCHEMA,
    REQUIRED_KEY,
    ConstraintRegistry,
)

logger = logging.getLogger(__name__)


class Validator:
    """Validate data objects against schemas using a constraint registry."""

    def __init__(self, registry: Optional[ConstraintRegistry] = None):
        self.registry = registry if registry is not None else ConstraintRegistry.default()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, schema: Mapping[str, Any], data: Mapping[str, Any]) -> ErrorResult:
        """Validate *data* against *schema*.

        Returns ``None`` if the data is valid, otherwise a mapping of field name
        to error message (or nested error mapping for ``schema`` constraints).

        Raises:
            ConfigurationError: If the schema is malformed or names an unknown
                constraint. Raised regardless of the data's contents.
        """
        started_at = time.perf_counter()
        with get_tracer().start_as_current_span(
            "feelings.validate",
            attributes={"feelings.schema.fields": len(schema) if isinstance(schema, MappingABC) else 0},
        ) as span:
            try:
                self.check_config(schema)
            except ConfigurationError as error:
                record_config_error(error)
                span.set_status(Status(StatusCode.ERROR, error.message))
                raise

            if not isinstance(data, MappingABC):
                raise TypeError(f"Data to validate must be a mapping, got {type(data).__name__}")

            errors = self.evaluate(schema, data)
            span.set_attribute("feelings.valid", errors is None)

        if errors:
            logger.debug("Validation failed for fields: %s", ", ".join(map(str, errors)))
        record_validation_metrics(errors, started_at, declared=schema)
        return errors

    def check(self, schema: Mapping[str, Any], data: Mapping[str, Any]) -> ValidationResult:
        """Like :meth:`validate` but wraps the outcome in a ``ValidationResult``."""

        return ValidationResult(self.validate(schema, data))

    def assert_valid(self, schema: Mapping[str, Any], data: Mapping[str, Any]) -> None:
        """Raise ``ValidationError`` if *data* does not satisfy *schema*."""

        self.check(schema, data).raise_for_errors()

    def check_constraints(self, constraint_set: Mapping[str, Any], value: Any) -> Any:
        """Evaluate a single constraint set against *value*.

        Returns the first error produced, or ``None``.
        """
        self.check_constraint_set_config(constraint_set)
        return self.evaluate_constraints(constraint_set, value)

    # ------------------------------------------------------------------
    # Configuration checks
    # ------------------------------------------------------------------

    def check_config(self, schema: Mapping[str, Any], path: str = "") -> None:
        """Raise ``ConfigurationError`` if any constraint set in *schema* is invalid."""

        if not isinstance(schema, MappingABC):
            raise ConfigurationError(
                f"Schema{_at(path)} must be a mapping of field names to constraint sets, "
                f"got {type(schema).__name__}"
            )
        for field_name, constraint_set in schema.items():
            self.check_constraint_set_config(constraint_set, _join(path, field_name))

    def check_constraint_set_config(self, constraint_set: Mapping[str, Any], path: str = "") -> None:
        if not isinstance(constraint_set, MappingABC):
            raise ConfigurationError(
                f"Constraint set{_at(path)} must be a mapping, got {type(constraint_set).__name__}"
            )

        for name, param in constraint_set.items():
            if name == REQUIRED_KEY:
                continue

            constraint = self.registry.get(name)
            if constraint is None:
                raise UnknownConstraintError(name, field=path or None)

            if param is None:
                continue

            if not constraint.accepts_param(param):
                raise ConfigurationError(
                    f"Constraint '{name}'{_at(path)} expects a parameter of type "
                    f"{constraint.describe_accepts()}, got {type(param).__name__}"
                )

            if constraint.check_param is not None:
                constraint.check_param(param, path)

            if constraint.nested == NESTED_CONSTRAINT_SET:
                self.check_constraint_set_config(param, f"{path}[]")
            elif constraint.nested == NESTED_SCHEMA:
                self.check_config(param, path)

    # ------------------------------------------------------------------
    # Evaluation (configuration assumed valid)
    # ------------------------------------------------------------------

    def evaluate(self, schema: Mapping[str, Any], data: Mapping[str, Any]) -> ErrorResult:
        """Evaluate *data* against an already checked *schema*.

        Used for nested schemas; skips configuration checks and telemetry.
        """
        errors: Dict[str, Any] = {}

        for field_name, constraint_set in schema.items():
            error = self.evaluate_constraints(constraint_set, data.get(field_name))
            if error:
                errors[field_name] = error

        # Unknown fields never have a schema entry, so cannot collide with the above.
        for field_name in data:
            if field_name not in schema:
                errors[field_name] = UNKNOWN_FIELD_MESSAGE

        return errors or None

    def evaluate_constraints(self, constraint_set: Mapping[str, Any], value: Any) -> Any:
        if value is None:
            if constraint_set.get(REQUIRED_KEY):
                return REQUIRED_MESSAGE
            return None

        for name, constraint in self.registry.items():
            param = constraint_set.get(name)
            if param is None:
                continue

            if constraint.nested:
                error = constraint.check(param, value, self)
            else:
                error = constraint.check(param, value)

            if error:
                return error

        return None


def _join(path: str, name: Any) -> str:
    return f"{path}.{name}" if path else str(name)


def _at(path: str) -> str:
    return f" on field '{path}'" if path else ""


__all__ = ["Validator"]
