"""Human-readable failure messages."""

from collections.abc import Iterable


def expression_not_allowed(attributes: Iterable[str]) -> str:
    names = ", ".join(sorted(attributes))
    return f"Expressions are not allowed for attribute(s): {names}"


def missing_required_parameter(parameter: str) -> str:
    return f"Missing required parameter '{parameter}'"
