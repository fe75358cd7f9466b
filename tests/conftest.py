"""Shared pytest fixtures for exprguard tests."""

import pytest

from exprguard.domain.models import (
    NAME,
    VALUE,
    WRITE_ATTRIBUTE_OPERATION,
    Operation,
    Resource,
    TaggedValue,
)
from exprguard.guards.reject_expressions import RejectExpressionValuesGuard
from exprguard.infrastructure.codec import model_from_python
from exprguard.infrastructure.context import InMemoryTransformationContext


@pytest.fixture
def watched() -> frozenset[str]:
    """The attribute names watched by the sample guard."""
    return frozenset({"host", "port", "options"})


@pytest.fixture
def guard(watched: frozenset[str]) -> RejectExpressionValuesGuard:
    """Create a guard watching host, port and options."""
    return RejectExpressionValuesGuard(watched)


@pytest.fixture
def clean_model() -> dict[str, TaggedValue]:
    """A snapshot with literal values only."""
    return model_from_python(
        {
            "host": "localhost",
            "port": 8080,
            "options": {"secure": True, "aliases": ["a", "b"]},
            "description": "${not.watched}",
        }
    )


@pytest.fixture
def expression_model() -> dict[str, TaggedValue]:
    """A snapshot where host and options hold expressions."""
    return model_from_python(
        {
            "host": {"EXPRESSION_VALUE": "${jboss.bind.address:127.0.0.1}"},
            "port": 8080,
            "options": {"secure": True, "aliases": ["a", "${alias.b}"]},
        }
    )


@pytest.fixture
def clean_resource(clean_model: dict[str, TaggedValue]) -> Resource:
    return Resource(clean_model)


@pytest.fixture
def expression_resource(expression_model: dict[str, TaggedValue]) -> Resource:
    return Resource(expression_model)


@pytest.fixture
def context() -> InMemoryTransformationContext:
    """Create an in-memory transformation context."""
    return InMemoryTransformationContext()


def make_write(name: str, value: TaggedValue | None = None) -> Operation:
    """Build a write-attribute request; value None leaves it out."""
    parameters = {NAME: TaggedValue.string(name)}
    if value is not None:
        parameters[VALUE] = value
    return Operation(
        name=WRITE_ATTRIBUTE_OPERATION,
        address=(("subsystem", "web"),),
        parameters=parameters,
    )


@pytest.fixture
def write_operation():
    """Factory fixture building write-attribute requests."""
    return make_write
