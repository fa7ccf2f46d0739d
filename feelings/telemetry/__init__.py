"""Telemetry package - OpenTelemetry instruments for validation calls."""

from .metrics import (
    config_error_total,
    record_config_error,
    record_validation_metrics,
    validation_field_error_total,
    validation_latency_ms,
    validation_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "config_error_total",
    "get_tracer",
    "meter",
    "record_config_error",
    "record_validation_metrics",
    "validation_field_error_total",
    "validation_latency_ms",
    "validation_total",
]
