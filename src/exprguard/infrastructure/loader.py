"""Configuration and input loading for the expression guard."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema

from exprguard import schemas
from exprguard.domain.exceptions import ConfigurationError
from exprguard.domain.models import (
    OP,
    OP_ADDR,
    AttributeDefinition,
    Operation,
    PathAddress,
    Resource,
    ValueKind,
)
from exprguard.guards.reject_expressions import RejectExpressionValuesGuard
from exprguard.infrastructure.codec import model_from_python

logger = logging.getLogger("exprguard.infrastructure")


def _read_json(path: Path, validate: Callable[[Any], None]) -> Any:
    """
    Read a JSON file and validate it against a schema.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise ConfigurationError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    try:
        validate(data)
    except jsonschema.ValidationError as e:
        raise ConfigurationError(f"Invalid {path.name}: {e.message}") from e
    return data


def guard_from_config(data: dict[str, Any]) -> RejectExpressionValuesGuard:
    """
    Build a guard from an already-parsed configuration.

    Args:
        data: Either ``{"attributes": [...]}`` or
            ``{"attribute_definitions": [{"name": ...}, ...]}``

    Raises:
        ConfigurationError: If the configuration does not match the schema
    """
    try:
        schemas.validate_guard_config(data)
    except jsonschema.ValidationError as e:
        raise ConfigurationError(f"Invalid guard configuration: {e.message}") from e
    return _build_guard(data)


def _build_guard(data: dict[str, Any]) -> RejectExpressionValuesGuard:
    if "attributes" in data:
        return RejectExpressionValuesGuard(data["attributes"])

    definitions = [
        AttributeDefinition(
            name=entry["name"],
            kind=ValueKind[entry.get("type", "STRING")],
        )
        for entry in data["attribute_definitions"]
    ]
    return RejectExpressionValuesGuard.from_definitions(*definitions)


def load_guard_config(path: Path) -> RejectExpressionValuesGuard:
    """
    Load a guard from a JSON configuration file.

    Args:
        path: Path to guard.json

    Returns:
        Guard watching the configured attributes

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    data = _read_json(path, schemas.validate_guard_config)
    guard = _build_guard(data)
    logger.debug("Loaded guard from %s: %s", path, sorted(guard.attribute_names))
    return guard


def load_resource(path: Path) -> Resource:
    """
    Load a resource snapshot from a JSON object of attribute values.

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    data = _read_json(path, schemas.validate_resource)
    return Resource(model_from_python(data))


def operation_from_python(data: dict[str, Any]) -> Operation:
    """
    Build an operation from a flat request object.

    ``operation`` names the request, ``address`` lists single-entry
    ``{type: value}`` objects, and every other key is a parameter.
    """
    address: PathAddress = tuple(
        (str(key), str(value))
        for element in data.get(OP_ADDR, [])
        for key, value in element.items()
    )
    parameters = {
        key: value for key, value in data.items() if key not in (OP, OP_ADDR)
    }
    return Operation(
        name=data[OP],
        address=address,
        parameters=model_from_python(parameters),
    )


def load_operation(path: Path) -> Operation:
    """
    Load an operation request from a JSON file.

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    data = _read_json(path, schemas.validate_operation)
    return operation_from_python(data)
