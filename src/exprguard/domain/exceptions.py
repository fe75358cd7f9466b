"""
Domain exceptions for the expression guard.

These represent failures raised while transforming a resource or an
operation for a consumer that only understands literal values.
"""

from collections.abc import Iterable

from exprguard.domain import messages


class TransformationFailedError(Exception):
    """Raised when a transformer cannot process a resource or an operation."""


class UnsupportedValueError(TransformationFailedError):
    """
    Raised when watched attributes hold unresolved expressions.

    Names every offending attribute at once so the caller can report a
    complete diagnostic in a single failure.
    """

    def __init__(self, attributes: Iterable[str]):
        """
        Args:
            attributes: Names of the attributes holding expressions
        """
        self.attributes = frozenset(attributes)
        super().__init__(messages.expression_not_allowed(self.attributes))


class MissingParameterError(TransformationFailedError):
    """Raised when an operation lacks a required parameter."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(messages.missing_required_parameter(parameter))


class ConfigurationError(Exception):
    """Raised when configuration or input files are invalid or missing."""

    pass
