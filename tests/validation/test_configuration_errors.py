# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema misconfiguration must abort validation, never become a field error."""

import pytest

from feelings import ConfigurationError, UnknownConstraintError, validate


@pytest.mark.parametrize(
    "data",
    [{}, {"foo": None}, {"foo": 1}, {"other": "x"}],
)
def test_unknown_constraint_fails_regardless_of_data(data):
    with pytest.raises(UnknownConstraintError, match="madeup"):
        validate({"foo": {"madeup": 123}}, data)


def test_unknown_constraint_inside_items_is_caught_before_data_is_read():
    with pytest.raises(UnknownConstraintError) as exc_info:
        validate({"tags": {"items": {"typ": str}}}, {})

    assert exc_info.value.field == "tags[]"
    assert "typ" in str(exc_info.value)


def test_unknown_constraint_inside_nested_schema_is_caught_for_absent_value():
    with pytest.raises(UnknownConstraintError) as exc_info:
        validate({"user": {"schema": {"name": {"maxLength": 5}}}}, {})

    assert exc_info.value.field == "user.name"


def test_required_is_not_treated_as_a_constraint():
    assert validate({"foo": {"required": False}}, {}) is None


@pytest.mark.parametrize(
    "constraints,fragment",
    [
        ({"min_length": "ten"}, "min_length"),
        ({"max_length": 2.5}, "max_length"),
        ({"min_length": True}, "min_length"),
        ({"type": "int"}, "type"),
        ({"matches": 123}, "matches"),
        ({"items": [{"type": int}]}, "items"),
        ({"schema": "nested"}, "schema"),
        ({"type": ("str",)}, "type"),
        ({"type": ()}, "type"),
        ({"type": (int, "float")}, "type"),
    ],
)
def test_badly_typed_parameters_are_configuration_errors(constraints, fragment):
    with pytest.raises(ConfigurationError) as exc_info:
        validate({"foo": constraints}, {"foo": "value"})

    message = str(exc_info.value)
    assert fragment in message
    assert "foo" in message


def test_none_parameters_are_ignored():
    assert validate({"foo": {"min": None, "type": None}}, {"foo": "x"}) is None


def test_zero_parameters_are_evaluated():
    assert validate({"foo": {"max": 0}}, {"foo": 1}) == {"foo": "Must be less than or equal to 0"}


@pytest.mark.parametrize("schema", [None, ["foo"], "foo"])
def test_schema_must_be_a_mapping(schema):
    with pytest.raises(ConfigurationError, match="Schema"):
        validate(schema, {})


def test_constraint_set_must_be_a_mapping():
    with pytest.raises(ConfigurationError, match="Constraint set on field 'foo'"):
        validate({"foo": ["required"]}, {})


def test_configuration_error_is_not_reported_as_field_error():
    with pytest.raises(ConfigurationError):
        validate({"ok": {"type": int}, "bad": {"madeup": 1}}, {"ok": "x"})


@pytest.mark.parametrize("data", [{}, {"foo": "x"}])
def test_invalid_regex_string_is_a_configuration_error(data):
    with pytest.raises(ConfigurationError, match="Invalid regex pattern for 'matches' on field 'foo'"):
        validate({"foo": {"matches": "("}}, data)


def test_invalid_regex_inside_items_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="on field 'tags\\[\\]'"):
        validate({"tags": {"items": {"matches": "[unclosed"}}}, {"tags": ["a"]})


@pytest.mark.parametrize("data", [{}, {"foo": "x"}])
def test_type_tuple_with_non_class_items_is_a_configuration_error(data):
    with pytest.raises(ConfigurationError, match="non-empty tuple of classes"):
        validate({"foo": {"type": ("str",)}}, data)


def test_custom_parameter_check_runs_during_configuration(registry, validator):
    def positive_only(param, path):
        if param <= 0:
            raise ConfigurationError(f"'multiple_of' on field '{path}' must be positive")

    registry.register(
        "multiple_of",
        lambda step, value: None if value % step == 0 else f"Must be a multiple of {step}",
        accepts=(int,),
        check_param=positive_only,
    )

    with pytest.raises(ConfigurationError, match="must be positive"):
        validator.validate({"n": {"multiple_of": 0}}, {})

    assert validator.validate({"n": {"multiple_of": 3}}, {"n": 4}) == {"n": "Must be a multiple of 3"}
