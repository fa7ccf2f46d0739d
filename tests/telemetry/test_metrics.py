# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry emitted by top-level validation calls."""

import pytest

from feelings import ConfigurationError, validate


def test_valid_call_records_status_and_latency(recorded_metrics):
    validate({"foo": {"type": int}}, {"foo": 1})

    assert recorded_metrics["validation_total"].calls == [(1, {"status": "valid"})]
    assert recorded_metrics["validation_field_error_total"].calls == []
    [(latency, attributes)] = recorded_metrics["validation_latency_ms"].calls
    assert latency >= 0
    assert attributes == {"status": "valid"}


def test_invalid_call_records_each_failing_field(recorded_metrics):
    validate({"foo": {"type": int}, "bar": {"required": True}}, {"foo": "x", "baz": 1})

    assert recorded_metrics["validation_total"].calls == [(1, {"status": "invalid"})]
    attributes = recorded_metrics["validation_field_error_total"].calls
    assert sorted(attrs["field"] for _, attrs in attributes if "field" in attrs) == ["bar", "foo"]
    assert (1, {"reason": "unknown_field"}) in attributes


def test_nested_schemas_count_as_a_single_call(recorded_metrics):
    validate(
        {"outer": {"schema": {"inner": {"schema": {"leaf": {"type": int}}}}}},
        {"outer": {"inner": {"leaf": "x"}}},
    )

    assert len(recorded_metrics["validation_total"].calls) == 1
    assert recorded_metrics["validation_field_error_total"].calls == [(1, {"field": "outer"})]


def test_configuration_errors_are_counted(recorded_metrics):
    with pytest.raises(ConfigurationError):
        validate({"foo": {"madeup": 1}}, {})

    assert recorded_metrics["config_error_total"].calls == [(1, {"error": "UnknownConstraintError"})]
    assert recorded_metrics["validation_total"].calls == []


def test_broken_instruments_do_not_break_validation(monkeypatch):
    import feelings.telemetry.metrics as metrics_module

    class _Broken:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

        def record(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(metrics_module, "validation_total", _Broken())
    monkeypatch.setattr(metrics_module, "validation_latency_ms", _Broken())

    assert validate({"foo": {"min": 1}}, {"foo": 0}) == {"foo": "Must be greater than or equal to 1"}


def test_payload_keys_never_become_metric_attributes(recorded_metrics):
    payload = {f"random-{i}": i for i in range(50)}

    errors = validate({"known": {"type": int}}, payload)

    assert len(errors) == 50
    calls = recorded_metrics["validation_field_error_total"].calls
    assert len(calls) == 50
    assert {tuple(sorted(attrs.items())) for _, attrs in calls} == {(("reason", "unknown_field"),)}
