# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Helpers for locating and reading schema files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..validation import ConstraintRegistry
from .bundle import SchemaBundle

logger = logging.getLogger(__name__)

SCHEMA_FILE_ENV = "FEELINGS_SCHEMA_FILE"
YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def locate_schema_file(schema_path: Optional[Union[str, Path]] = None) -> Path:
    """Return the schema file to load.

    An explicit *schema_path* wins; otherwise ``FEELINGS_SCHEMA_FILE`` is used.
    """
    candidate = schema_path or os.getenv(SCHEMA_FILE_ENV)
    if not candidate:
        raise ConfigurationError(
            f"No schema file given and {SCHEMA_FILE_ENV} is not set"
        )

    path = Path(candidate).expanduser()
    if not path.is_file():
        raise ConfigurationError(f"Schema file not found: {path}")
    return path


def read_schema_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.error("Schema file %s is not valid UTF-8: %s", path, exc)
        raise ConfigurationError(f"Schema file {path} is not valid UTF-8: {exc}") from exc

    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        logger.error("Failed to parse schema file %s: %s", path, exc)
        raise ConfigurationError(f"Schema file {path} is not valid {suffix[1:].upper()}: {exc}") from exc

    raise ConfigurationError(
        f"Unsupported schema file type '{suffix}' for {path}; "
        f"expected one of {', '.join(YAML_SUFFIXES + JSON_SUFFIXES)}"
    )


def load_schema_file(
    schema_path: Optional[Union[str, Path]] = None,
    *,
    registry: Optional[ConstraintRegistry] = None,
) -> SchemaBundle:
    """Load and parse a YAML or JSON schema file into a ``SchemaBundle``."""

    path = locate_schema_file(schema_path)
    raw = read_schema_file(path)
    if raw is None:
        raw = {}
    logger.debug("Loaded schema file %s", path)
    return SchemaBundle(raw_bundle=raw, source=str(path), registry=registry)


__all__ = [
    "SCHEMA_FILE_ENV",
    "load_schema_file",
    "locate_schema_file",
    "read_schema_file",
]
