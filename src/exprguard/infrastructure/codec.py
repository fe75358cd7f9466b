"""
Conversion between plain Python/JSON data and tagged values.

JSON has no expression or property type, so both use a single-key marker
object:

    {"EXPRESSION_VALUE": "${jboss.bind.address:127.0.0.1}"}
    {"PROPERTY_VALUE": {"name": "value"}}

Every other object becomes an OBJECT value with its member order kept.
"""

from collections.abc import Mapping
from typing import Any

from exprguard.domain.models import UNDEFINED, TaggedValue, ValueKind

EXPRESSION_MARKER = "EXPRESSION_VALUE"
PROPERTY_MARKER = "PROPERTY_VALUE"


def from_python(obj: Any) -> TaggedValue:
    """
    Convert a JSON-compatible Python value to a tagged value.

    Args:
        obj: None, bool, int, float, str, list/tuple, dict or TaggedValue

    Returns:
        The corresponding TaggedValue

    Raises:
        TypeError: If the value has no tagged representation
    """
    if isinstance(obj, TaggedValue):
        return obj
    if obj is None:
        return UNDEFINED
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return TaggedValue.boolean(obj)
    if isinstance(obj, int):
        return TaggedValue.integer(obj)
    if isinstance(obj, float):
        return TaggedValue.double(obj)
    if isinstance(obj, str):
        return TaggedValue.string(obj)
    if isinstance(obj, list | tuple):
        return TaggedValue.list_of(*(from_python(item) for item in obj))
    if isinstance(obj, Mapping):
        return _from_mapping(obj)
    raise TypeError(f"Cannot convert {type(obj).__name__} to a tagged value")


def _from_mapping(obj: Mapping[str, Any]) -> TaggedValue:
    if len(obj) == 1:
        key, inner = next(iter(obj.items()))
        if key == EXPRESSION_MARKER and isinstance(inner, str):
            return TaggedValue.expression(inner)
        if key == PROPERTY_MARKER and isinstance(inner, Mapping) and len(inner) == 1:
            name, value = next(iter(inner.items()))
            return TaggedValue.property_of(name, from_python(value))
    return TaggedValue.object_of(
        (str(name), from_python(value)) for name, value in obj.items()
    )


def to_python(value: TaggedValue) -> Any:
    """Convert a tagged value back to JSON-compatible Python data."""
    match value.kind:
        case ValueKind.UNDEFINED:
            return None
        case ValueKind.EXPRESSION:
            return {EXPRESSION_MARKER: value.as_string()}
        case ValueKind.LIST:
            return [to_python(item) for item in value.as_list()]
        case ValueKind.OBJECT:
            return {
                name: to_python(member) for name, member in value.as_property_list()
            }
        case ValueKind.PROPERTY:
            name, member = value.as_property()
            return {PROPERTY_MARKER: {name: to_python(member)}}
        case _:
            return value.payload


def model_from_python(data: Mapping[str, Any]) -> dict[str, TaggedValue]:
    """Convert a whole attribute snapshot."""
    return {str(name): from_python(value) for name, value in data.items()}


def model_to_python(model: Mapping[str, TaggedValue]) -> dict[str, Any]:
    return {name: to_python(value) for name, value in model.items()}
