# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for feelings."""

from __future__ import annotations

import logging
import time
from typing import Any, Collection, Mapping, Optional

from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="feelings.validation.total",
    description="Counts top-level validation calls, partitioned by outcome.",
    unit="1",
)

validation_field_error_total = meter.create_counter(
    name="feelings.validation.field_error.total",
    description="Counts fields reported as invalid by top-level validation calls.",
    unit="1",
)

config_error_total = meter.create_counter(
    name="feelings.config_error.total",
    description="Counts validation calls aborted by a schema configuration error.",
    unit="1",
)

validation_latency_ms = meter.create_histogram(
    name="feelings.validation.latency.ms",
    description="Time taken by a single top-level validation call.",
    unit="ms",
)


def record_validation_metrics(
    errors: Optional[Mapping[str, Any]],
    started_at: float,
    declared: Collection[str] = (),
) -> None:
    """Record outcome and latency of a validation call.

    Only fields declared in the schema are used as attribute values; keys that
    come from the payload alone are counted under a single unknown-field series.

    Args:
        errors: The error mapping returned by the validator (``None`` if valid)
        started_at: Timestamp from time.perf_counter() when validation started
        declared: Field names declared by the schema
    """
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    status = "invalid" if errors else "valid"
    try:
        validation_latency_ms.record(duration_ms, {"status": status})
        validation_total.add(1, {"status": status})
        for field_name in errors or ():
            if field_name in declared:
                attributes = {"field": str(field_name)}
            else:
                attributes = {"reason": "unknown_field"}
            validation_field_error_total.add(1, attributes)
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validation metrics", exc_info=True)


def record_config_error(error: Exception) -> None:
    try:
        config_error_total.add(1, {"error": type(error).__name__})
    except Exception:
        logger.debug("Failed to record configuration error metric", exc_info=True)


__all__ = [
    "config_error_total",
    "record_config_error",
    "record_validation_metrics",
    "validation_field_error_total",
    "validation_latency_ms",
    "validation_total",
]
