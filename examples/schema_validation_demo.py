# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema Validation Demo: validating API payloads.

This demo walks through the common ways of using feelings:
1. Validating a payload against a schema written in code
2. Catching schema typos (unknown constraints) as configuration errors
3. Registering a custom constraint on a dedicated registry
4. Loading schemas from a YAML file

Run with:
    python examples/schema_validation_demo.py
"""

import tempfile
from pathlib import Path

from feelings import (
    ConfigurationError,
    ConstraintRegistry,
    ValidationError,
    Validator,
    assert_valid,
    load_schema_file,
    validate,
)

SIGNUP_SCHEMA = {
    "username": {"required": True, "type": str, "min_length": 3, "max_length": 20},
    "age": {"type": int, "min": 13, "max": 130},
    "interests": {"items": {"type": str}},
    "address": {
        "schema": {
            "city": {"required": True, "type": str},
            "zip": {"matches": r"^\d{5}$"},
        }
    },
}


def demo_payload_validation():
    print("\n" + "=" * 70)
    print("DEMO 1: Payload Validation")
    print("=" * 70)

    good = {"username": "alice", "age": 31, "address": {"city": "Lyon", "zip": "69001"}}
    bad = {"username": "al", "age": 7, "interests": ["go", 3], "address": {"zip": "nope"}, "admin": True}

    print(f"\n  Valid payload   -> {validate(SIGNUP_SCHEMA, good)}")
    print("  Invalid payload ->")
    for field, error in validate(SIGNUP_SCHEMA, bad).items():
        print(f"    {field}: {error}")

    try:
        assert_valid(SIGNUP_SCHEMA, bad)
    except ValidationError as e:
        print(f"\n  assert_valid raised:\n{e}")


def demo_unknown_constraint():
    print("\n" + "=" * 70)
    print("DEMO 2: Unknown Constraint Detection")
    print("=" * 70)
    print("\nTrying a schema with a typo: 'maximum' instead of 'max'")

    try:
        validate({"row_limit": {"maximum": 1000}}, {})
        print("  Result: FAIL - schema accepted (should have been rejected)")
    except ConfigurationError as e:
        print("  Result: SUCCESS - schema rejected before any data was checked")
        print(f"    {e}")


def demo_custom_constraint():
    print("\n" + "=" * 70)
    print("DEMO 3: Custom Constraints")
    print("=" * 70)

    registry = ConstraintRegistry.default()

    @registry.constraint("one_of", accepts=(list, tuple))
    def one_of(choices, value):
        if value not in choices:
            return f"Must be one of {', '.join(map(str, choices))}"
        return None

    validator = Validator(registry)
    schema = {"status": {"required": True, "type": str, "one_of": ["ok", "error"]}}

    print(f"\n  status='ok'      -> {validator.validate(schema, {'status': 'ok'})}")
    print(f"  status='unknown' -> {validator.validate(schema, {'status': 'unknown'})}")


def demo_schema_file():
    print("\n" + "=" * 70)
    print("DEMO 4: Schemas From YAML")
    print("=" * 70)

    schema_file = """
metadata:
  name: orders
schemas:
  order:
    id: {required: true, type: string, matches: "^ord_[a-z0-9]+$"}
    total: {type: number, min: 0}
    lines:
      items:
        schema:
          sku: {required: true, type: string}
          quantity: {type: int, min: 1}
"""

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "schemas.yaml"
        path.write_text(schema_file)
        bundle = load_schema_file(path)

    order = bundle.get("order")
    payload = {"id": "ord_42", "total": 10.5, "lines": [{"sku": "A1", "quantity": 0}]}
    print(f"\n  Loaded schemas: {sorted(bundle.names)}")
    print(f"  Validation result: {validate(order, payload)}")


if __name__ == "__main__":
    demo_payload_validation()
    demo_unknown_constraint()
    demo_custom_constraint()
    demo_schema_file()
