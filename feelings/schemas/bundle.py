# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema bundle data structures.

Schemas written in code use Python classes and compiled patterns directly.
Schemas loaded from YAML or JSON only contain plain data, so a bundle resolves
them first: type names become classes, ``matches`` strings are compiled and
nested ``items``/``schema`` parameters are resolved recursively. Configuration
errors are raised while the bundle is built, never during validation.
"""

from __future__ import annotations

import datetime as _dt
import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError
from ..validation import ConstraintRegistry, Validator
from ..validation.constraints import compile_pattern

logger = logging.getLogger(__name__)

TYPE_NAMES: Dict[str, Any] = {
    "str": str,
    "string": str,
    "int": int,
    "integer": int,
    "float": float,
    "number": (int, float, Decimal),
    "decimal": Decimal,
    "bool": bool,
    "boolean": bool,
    "list": list,
    "array": list,
    "tuple": tuple,
    "dict": dict,
    "object": MappingABC,
    "mapping": MappingABC,
    "bytes": bytes,
    "date": _dt.date,
    "datetime": _dt.datetime,
}


def resolve_type(kind: Any, path: str = "") -> Any:
    """Resolve a type name (or list of names) to a class (or tuple of classes)."""

    if isinstance(kind, type):
        return kind
    if isinstance(kind, (list, tuple)):
        resolved = []
        for item in kind:
            resolved_kind = resolve_type(item, path)
            resolved.extend(resolved_kind if isinstance(resolved_kind, tuple) else (resolved_kind,))
        return tuple(resolved)
    if isinstance(kind, str) and kind.lower() in TYPE_NAMES:
        return TYPE_NAMES[kind.lower()]
    raise ConfigurationError(f"Unknown type name {kind!r} on field '{path}'")


def parse_constraint_set(raw: Any, path: str = "") -> Dict[str, Any]:
    if not isinstance(raw, MappingABC):
        raise ConfigurationError(
            f"Constraint set on field '{path}' must be a mapping, got {type(raw).__name__}"
        )

    parsed: Dict[str, Any] = {}
    for name, param in raw.items():
        if param is None:
            parsed[name] = param
        elif name == "type":
            parsed[name] = resolve_type(param, path)
        elif name == "matches":
            parsed[name] = compile_pattern(param, path)
        elif name == "items":
            parsed[name] = parse_constraint_set(param, f"{path}[]")
        elif name == "schema":
            parsed[name] = parse_schema(param, path)
        else:
            parsed[name] = param
    return parsed


def parse_schema(
    raw: Any,
    path: str = "",
    *,
    registry: Optional[ConstraintRegistry] = None,
) -> Dict[str, Dict[str, Any]]:
    """Resolve a plain-data schema into one the validator can evaluate.

    When *registry* is given the parsed schema is also checked against it, so
    unknown constraint names and badly typed parameters fail here.
    """
    if not isinstance(raw, MappingABC):
        raise ConfigurationError(
            f"Schema{f' on field {path!r}' if path else ''} must be a mapping, got {type(raw).__name__}"
        )

    schema = {
        str(name): parse_constraint_set(constraints, f"{path}.{name}" if path else str(name))
        for name, constraints in raw.items()
    }

    if registry is not None:
        Validator(registry).check_config(schema, path)
    return schema


@dataclass
class SchemaBundle:
    """A named collection of schemas parsed from a schema file."""

    raw_bundle: Dict[str, Any]
    source: str = "<memory>"
    registry: Optional[ConstraintRegistry] = field(default=None, repr=False)
    metadata: Dict[str, Any] = field(default_factory=dict)
    schemas: Dict[str, Dict[str, Any]] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw_bundle, MappingABC):
            raise ConfigurationError(f"Schema bundle from {self.source} must be a mapping")

        if self.registry is None:
            from ..runtime import get_registry

            self.registry = get_registry()

        self.metadata = dict(self.raw_bundle.get("metadata") or {})
        raw_schemas = self.raw_bundle.get("schemas")
        if not isinstance(raw_schemas, MappingABC):
            raise ConfigurationError(
                f"Schema bundle from {self.source} must define a 'schemas' mapping"
            )

        logger.debug("Processing %d schemas from %s", len(raw_schemas), self.source)
        for name, raw_schema in raw_schemas.items():
            try:
                self.schemas[str(name)] = parse_schema(raw_schema, registry=self.registry)
            except ConfigurationError as exc:
                logger.error("Invalid schema '%s' in %s: %s", name, self.source, exc.message)
                raise ConfigurationError(f"Schema '{name}' in {self.source}: {exc.message}") from exc

        logger.debug("Loaded schemas: %s", ", ".join(self.schemas))

    def get(self, name: str) -> Dict[str, Any]:
        try:
            return self.schemas[name]
        except KeyError:
            raise ConfigurationError(f"Schema '{name}' is not defined in {self.source}") from None

    @property
    def names(self):
        return set(self.schemas)

    def __contains__(self, name: object) -> bool:
        return name in self.schemas


__all__ = [
    "SchemaBundle",
    "TYPE_NAMES",
    "compile_pattern",
    "parse_constraint_set",
    "parse_schema",
    "resolve_type",
]
