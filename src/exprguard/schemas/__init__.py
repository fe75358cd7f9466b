"""exprguard JSON Schema definitions and validation utilities.

Schemas:
    - guard.schema.json: Guard configuration (watched attributes)
    - resource.schema.json: Resource snapshot (attribute name to value)
    - operation.schema.json: Flat operation request

Usage:
    from exprguard.schemas import validate_guard_config

    with open("guard.json") as f:
        data = json.load(f)
    validate_guard_config(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'guard.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("exprguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_guard_schema() -> dict[str, Any]:
    return _load_schema("guard.schema.json")


def get_resource_schema() -> dict[str, Any]:
    return _load_schema("resource.schema.json")


def get_operation_schema() -> dict[str, Any]:
    return _load_schema("operation.schema.json")


def validate_guard_config(data: Any) -> None:
    """Validate a guard configuration against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_guard_schema())


def validate_resource(data: Any) -> None:
    """Validate a resource snapshot against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_resource_schema())


def validate_operation(data: Any) -> None:
    """Validate an operation request against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_operation_schema())


__all__ = [
    "get_guard_schema",
    "get_resource_schema",
    "get_operation_schema",
    "validate_guard_config",
    "validate_resource",
    "validate_operation",
]
