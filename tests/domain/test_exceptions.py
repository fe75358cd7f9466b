"""Tests for domain exceptions and messages."""

from exprguard.domain import messages
from exprguard.domain.exceptions import (
    MissingParameterError,
    TransformationFailedError,
    UnsupportedValueError,
)


class TestUnsupportedValueError:
    def test_carries_all_attributes(self):
        error = UnsupportedValueError(["b", "a"])
        assert error.attributes == frozenset({"a", "b"})
        assert str(error) == "Expressions are not allowed for attribute(s): a, b"

    def test_hierarchy(self):
        assert issubclass(UnsupportedValueError, TransformationFailedError)
        assert issubclass(MissingParameterError, TransformationFailedError)


class TestMessages:
    def test_expression_not_allowed_single(self):
        assert (
            messages.expression_not_allowed(["host"])
            == "Expressions are not allowed for attribute(s): host"
        )

    def test_missing_required_parameter(self):
        error = MissingParameterError("name")
        assert error.parameter == "name"
        assert str(error) == messages.missing_required_parameter("name")
        assert "'name'" in str(error)
