"""
Expression detection.

Pure functions with no I/O: find unresolved ``${...}`` placeholders anywhere
inside a tagged value, and collect the watched attributes of a model that
hold one.
"""

import re
from collections.abc import Mapping, Set

from exprguard.domain.models import TaggedValue, ValueKind

# Full-string match of a wildcard-wrapped pattern: any embedded ${...} counts.
# DOTALL lets the wildcards span newlines, so "line one\n${x}" is flagged too;
# without it only single-line values would match.
EXPRESSION_PATTERN = re.compile(r".*\$\{.*\}.*", re.DOTALL)


def matches_expression(text: str) -> bool:
    """Whether a string contains a ``${...}`` placeholder."""
    return EXPRESSION_PATTERN.fullmatch(text) is not None


def contains_expression(value: TaggedValue) -> bool:
    """
    Check a value for expressions, depth first.

    Lists and objects short-circuit on the first element holding an
    expression. Scalar literals never hold one.

    Args:
        value: The attribute value or a nested sub-value

    Returns:
        True if an expression was found anywhere in the value
    """
    match value.kind:
        case ValueKind.UNDEFINED:
            return False
        case ValueKind.STRING | ValueKind.EXPRESSION:
            return matches_expression(value.as_string())
        case ValueKind.LIST:
            return any(contains_expression(item) for item in value.as_list())
        case ValueKind.OBJECT:
            return any(
                contains_expression(member) for _, member in value.as_property_list()
            )
        case ValueKind.PROPERTY:
            return contains_expression(value.as_property()[1])
        case _:
            return False


def check_model(
    attribute_names: Set[str], model: Mapping[str, TaggedValue]
) -> frozenset[str]:
    """
    Check the watched attributes of a model for expression values.

    Attributes that are absent or undefined are skipped without inspection.

    Args:
        attribute_names: The watched attribute names
        model: Attribute name to value

    Returns:
        Names of the attributes containing an expression (empty if none)
    """
    offending: set[str] = set()
    for attribute in attribute_names:
        value = model.get(attribute)
        if value is None or not value.is_defined:
            continue
        if contains_expression(value):
            offending.add(attribute)
    return frozenset(offending)
