# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in constraints and the registry that holds them.

Every constraint is a plain function ``(param, value) -> Optional[error]``.
It returns ``None`` when the value passes and an error otherwise: a string
message, or an error mapping for constraints that validate nested schemas.

Two constraints recurse back into the validator (``items`` and ``schema``).
They are registered with ``nested`` set and are called with the validator as a
third argument so nested evaluation uses the same registry as the caller.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping as MappingABC, Sequence as SequenceABC, Sized
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_KEY = "required"

# Values of ``Constraint.nested``.
NESTED_CONSTRAINT_SET = "constraint_set"
NESTED_SCHEMA = "schema"

ConstraintCheck = Callable[..., Any]


@dataclass(frozen=True)
class Constraint:
    """A named predicate together with the parameter types it accepts."""

    name: str
    check: ConstraintCheck
    accepts: Optional[Tuple[type, ...]] = None
    nested: Optional[str] = None
    # Optional (param, path) hook raising ConfigurationError for bad parameters.
    check_param: Optional[Callable[[Any, str], None]] = None

    def accepts_param(self, param: Any) -> bool:
        if self.accepts is None:
            return True
        # bool is an int subclass but never a sensible length or bound.
        if isinstance(param, bool) and bool not in self.accepts:
            return False
        return isinstance(param, self.accepts)

    def describe_accepts(self) -> str:
        if not self.accepts:
            return "any"
        return " or ".join(kind.__name__ for kind in self.accepts)


def type_name(expected: Union[type, Tuple[type, ...]]) -> str:
    """Human-readable name for a class or tuple of classes."""

    if isinstance(expected, tuple):
        return " or ".join(type_name(item) for item in expected)
    return getattr(expected, "__name__", repr(expected))


def pattern_source(pattern: Union[str, "re.Pattern[str]"]) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else str(pattern)


def compile_pattern(pattern: Any, path: str = "") -> "re.Pattern[str]":
    """Compile a ``matches`` parameter, raising ``ConfigurationError`` if it is invalid."""

    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as exc:
        where = f" on field '{path}'" if path else ""
        raise ConfigurationError(
            f"Invalid regex pattern for 'matches'{where}: {pattern!r} ({exc})"
        ) from exc


def check_type_param(expected: Any, path: str = "") -> None:
    kinds = expected if isinstance(expected, tuple) else (expected,)
    if not kinds or not all(isinstance(kind, type) for kind in kinds):
        where = f" on field '{path}'" if path else ""
        raise ConfigurationError(
            f"Constraint 'type'{where} expects a class or a non-empty tuple of classes, got {expected!r}"
        )


# ---------------------------------------------------------------------------
# Built-in constraints
# ---------------------------------------------------------------------------


def check_type(expected: Union[type, Tuple[type, ...]], value: Any) -> Optional[str]:
    if isinstance(value, expected):
        return None
    return f"Expected an instance of {type_name(expected)}"


def check_min(minimum: Any, value: Any) -> Optional[str]:
    try:
        too_small = value < minimum
    except TypeError:
        too_small = True
    if too_small:
        return f"Must be greater than or equal to {minimum}"
    return None


def check_max(maximum: Any, value: Any) -> Optional[str]:
    try:
        too_large = maximum < value
    except TypeError:
        too_large = True
    if too_large:
        return f"Must be less than or equal to {maximum}"
    return None


def check_min_length(min_length: int, value: Any) -> Optional[str]:
    # Falsy values (including empty strings and sequences) skip the check.
    if value and isinstance(value, Sized) and len(value) < min_length:
        return f"Must be longer than or equal to {min_length}"
    return None


def check_max_length(max_length: int, value: Any) -> Optional[str]:
    if value and isinstance(value, Sized) and max_length < len(value):
        return f"Must be shorter than or equal to {max_length}"
    return None


def check_matches(pattern: Union[str, "re.Pattern[str]"], value: Any) -> Optional[str]:
    if isinstance(value, str) and re.search(pattern, value):
        return None
    return f"Must match pattern {pattern_source(pattern)}"


def check_items(item_constraints: Mapping[str, Any], value: Any, validator) -> Any:
    if not isinstance(value, SequenceABC):
        return None
    for item in value:
        error = validator.evaluate_constraints(item_constraints, item)
        if error:
            return error
    return None


def check_schema(schema: Mapping[str, Any], value: Any, validator) -> Any:
    if not isinstance(value, MappingABC):
        return "Expected an instance of Mapping"
    return validator.evaluate(schema, value)


BUILTIN_CONSTRAINTS: Tuple[Constraint, ...] = (
    Constraint("type", check_type, accepts=(type, tuple), check_param=check_type_param),
    Constraint("min", check_min),
    Constraint("max", check_max),
    Constraint("min_length", check_min_length, accepts=(int,)),
    Constraint("max_length", check_max_length, accepts=(int,)),
    Constraint("matches", check_matches, accepts=(str, re.Pattern), check_param=compile_pattern),
    Constraint("items", check_items, accepts=(MappingABC,), nested=NESTED_CONSTRAINT_SET),
    Constraint("schema", check_schema, accepts=(MappingABC,), nested=NESTED_SCHEMA),
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ConstraintRegistry(MappingABC):
    """Ordered, extensible mapping of constraint name -> ``Constraint``.

    Iteration order is registration order, which is also the order the
    validator evaluates constraints in. Built-ins come first, so custom
    constraints always run after them.

    Registries are independent objects; build one per validator when you need
    isolated configuration, or extend the process-wide default at start-up.
    """

    def __init__(self, constraints: Optional[Mapping[str, Constraint]] = None):
        self._constraints: Dict[str, Constraint] = dict(constraints or {})

    @classmethod
    def default(cls) -> "ConstraintRegistry":
        """Create a registry holding the built-in constraints."""

        return cls({constraint.name: constraint for constraint in BUILTIN_CONSTRAINTS})

    def __getitem__(self, name: str) -> Constraint:
        return self._constraints[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def __repr__(self) -> str:
        return f"ConstraintRegistry({list(self._constraints)!r})"

    def register(
        self,
        name: str,
        check: ConstraintCheck,
        *,
        accepts: Optional[Tuple[type, ...]] = None,
        nested: Optional[str] = None,
        check_param: Optional[Callable[[Any, str], None]] = None,
        replace: bool = False,
    ) -> Constraint:
        """Register *check* under *name*.

        :param accepts: Optional tuple of parameter types; schemas configuring
                        the constraint with any other type are rejected as a
                        configuration error.
        :param nested: ``"constraint_set"`` or ``"schema"`` if the parameter is
                       itself a constraint set or schema. Such checks are
                       called with the validator as a third argument.
        :param check_param: Optional ``(param, path)`` hook run during the
                            configuration check; raise ``ConfigurationError``
                            to reject a parameter.
        :param replace: Allow overriding an existing constraint.
        """

        if not name or not isinstance(name, str):
            raise ConfigurationError(f"Constraint name must be a non-empty string, got {name!r}")
        if name == REQUIRED_KEY:
            raise ConfigurationError(f'"{REQUIRED_KEY}" is reserved and cannot be registered')
        if not callable(check):
            raise ConfigurationError(f"Constraint '{name}' must be callable")
        if nested not in (None, NESTED_CONSTRAINT_SET, NESTED_SCHEMA):
            raise ConfigurationError(f"Unsupported nested kind for constraint '{name}': {nested!r}")
        if accepts is not None and not isinstance(accepts, tuple):
            accepts = (accepts,)

        if name in self._constraints:
            if not replace:
                raise ConfigurationError(
                    f"Constraint '{name}' is already registered; pass replace=True to override it"
                )
            logger.warning("Replacing registered constraint '%s'", name)

        constraint = Constraint(
            name=name, check=check, accepts=accepts, nested=nested, check_param=check_param
        )
        self._constraints[name] = constraint
        logger.debug("Registered constraint '%s'", name)
        return constraint

    def constraint(self, name: str, **options: Any) -> Callable[[ConstraintCheck], ConstraintCheck]:
        """Decorator form of :meth:`register`.

        .. code-block:: python

            @registry.constraint("one_of", accepts=(list, tuple))
            def one_of(choices, value):
                if value not in choices:
                    return f"Must be one of {choices}"
        """

        def decorator(func: ConstraintCheck) -> ConstraintCheck:
            self.register(name, func, **options)
            return func

        return decorator

    def unregister(self, name: str) -> None:
        try:
            del self._constraints[name]
        except KeyError:
            raise ConfigurationError(f"Constraint '{name}' is not registered") from None
        logger.debug("Unregistered constraint '%s'", name)

    def copy(self) -> "ConstraintRegistry":
        return type(self)(self._constraints)


__all__ = [
    "BUILTIN_CONSTRAINTS",
    "Constraint",
    "ConstraintRegistry",
    "NESTED_CONSTRAINT_SET",
    "NESTED_SCHEMA",
    "REQUIRED_KEY",
    "check_items",
    "check_matches",
    "check_max",
    "check_max_length",
    "check_min",
    "check_min_length",
    "check_schema",
    "check_type",
    "check_type_param",
    "compile_pattern",
    "pattern_source",
    "type_name",
]
