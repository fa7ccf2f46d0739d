"""Shared pytest fixtures for the feelings test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from feelings import ConstraintRegistry, Validator


@pytest.fixture()
def registry() -> ConstraintRegistry:
    """Return a fresh registry holding only the built-in constraints."""
    return ConstraintRegistry.default()


@pytest.fixture()
def validator(registry) -> Validator:
    """Return a validator with its own registry (isolated from the global one)."""
    return Validator(registry)


class RecordingInstrument:
    """Stand-in for an OpenTelemetry counter/histogram that keeps its calls."""

    def __init__(self):
        self.calls: List[tuple[Any, Optional[Dict[str, Any]]]] = []

    def add(self, amount, attributes=None):
        self.calls.append((amount, attributes))

    def record(self, amount, attributes=None):
        self.calls.append((amount, attributes))


@pytest.fixture()
def recorded_metrics(monkeypatch) -> Dict[str, RecordingInstrument]:
    """Replace the metric instruments with recording stand-ins."""
    import feelings.telemetry.metrics as metrics_module

    instruments = {}
    for name in (
        "validation_total",
        "validation_field_error_total",
        "config_error_total",
        "validation_latency_ms",
    ):
        instrument = RecordingInstrument()
        monkeypatch.setattr(metrics_module, name, instrument)
        instruments[name] = instrument
    return instruments


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield
