"""
Guard rejecting attribute values that contain an expression.

Operations are never interrupted: a rejection policy is attached and the
pipeline decides once the operation has executed. Resource snapshots have
no such phase, so they fail immediately.

The watched attribute set is passed explicitly to each protocol function;
the transformer classes only hold it and delegate.
"""

import logging
from collections.abc import Iterable, Mapping, Set
from typing import Any

from exprguard.domain.exceptions import MissingParameterError, UnsupportedValueError
from exprguard.domain.interfaces import (
    DEFAULT_RESOURCE_TRANSFORMER,
    OperationTransformerInterface,
    ResourceTransformerInterface,
    TransformationContextInterface,
)
from exprguard.domain.models import (
    DEFAULT_REJECTION_POLICY,
    NAME,
    ORIGINAL_RESULT,
    VALUE,
    AttributeDefinition,
    Operation,
    PathAddress,
    RejectionPolicy,
    Resource,
    TaggedValue,
    TransformedOperation,
    ValueKind,
)
from exprguard.guards.detection import check_model, contains_expression

logger = logging.getLogger("exprguard.guards")


def evaluate_operation(
    attribute_names: Set[str], operation: Operation
) -> TransformedOperation:
    """
    Attach a rejection policy to a generic change request.

    The operation is returned unmodified; expressions are flagged, never
    stripped.
    """
    attributes = check_model(attribute_names, operation.parameters)
    if attributes:
        logger.debug(
            "Rejecting %s: expressions in %s", operation.name, sorted(attributes)
        )
        policy = RejectionPolicy(attributes)
    else:
        policy = DEFAULT_REJECTION_POLICY
    return TransformedOperation(operation, policy, ORIGINAL_RESULT)


def _target_attribute(operation: Operation) -> str | None:
    """
    Name of the attribute a write-attribute request targets.

    Scalar names are rendered as text. Structured names cannot name an
    attribute and yield None.

    Raises:
        MissingParameterError: If the name is absent or undefined
    """
    name = operation.require(NAME)
    match name.kind:
        case ValueKind.UNDEFINED:
            raise MissingParameterError(NAME)
        case ValueKind.LIST | ValueKind.OBJECT | ValueKind.PROPERTY:
            return None
        case _:
            return name.as_text()


def evaluate_write_attribute(
    attribute_names: Set[str], operation: Operation
) -> TransformedOperation:
    """
    Attach a rejection policy to a write-attribute request.

    Only the targeted attribute is inspected.

    Raises:
        MissingParameterError: If the request does not name an attribute
    """
    attribute = _target_attribute(operation)
    if attribute in attribute_names and operation.has_defined(VALUE):
        if contains_expression(operation.get(VALUE)):
            logger.debug("Rejecting write of %s: value is an expression", attribute)
            policy = RejectionPolicy(frozenset({attribute}))
            return TransformedOperation(operation, policy, ORIGINAL_RESULT)
    # Not an expression, forward unmodified
    return TransformedOperation(operation, DEFAULT_REJECTION_POLICY, ORIGINAL_RESULT)


def validate_resource(
    attribute_names: Set[str], model: Mapping[str, TaggedValue]
) -> None:
    """
    Fail when any watched attribute of a snapshot holds an expression.

    Raises:
        UnsupportedValueError: Naming every offending attribute
    """
    attributes = check_model(attribute_names, model)
    if attributes:
        logger.debug("Rejecting resource: expressions in %s", sorted(attributes))
        raise UnsupportedValueError(attributes)


class WriteAttributeGuard(OperationTransformerInterface):
    """Write-attribute transformer sharing the watch set of its parent guard."""

    def __init__(self, attribute_names: Set[str]):
        self.attribute_names = frozenset(attribute_names)

    def transform_operation(
        self, context: Any, address: PathAddress, operation: Operation
    ) -> TransformedOperation:
        return evaluate_write_attribute(self.attribute_names, operation)


class RejectExpressionValuesGuard(
    OperationTransformerInterface, ResourceTransformerInterface
):
    """
    Rejects expression values in a fixed set of attributes.

    Handles generic operations and resource snapshots directly; write-attribute
    requests go through ``write_attribute_transformer``, since pipelines
    dispatch them on a separate path.

    Example:
        guard = RejectExpressionValuesGuard.from_names("timeout", "host")
        transformed = guard.transform_operation(ctx, address, operation)
        if transformed.reject_operation(result):
            report(transformed.failure_description)
    """

    def __init__(self, attribute_names: Iterable[str] = ()):
        """
        Args:
            attribute_names: Attributes to watch (may be empty)
        """
        self.attribute_names = frozenset(attribute_names)
        self._write_attribute_transformer = WriteAttributeGuard(self.attribute_names)

    @classmethod
    def from_names(cls, *names: str) -> "RejectExpressionValuesGuard":
        return cls(names)

    @classmethod
    def from_definitions(
        cls, *definitions: AttributeDefinition
    ) -> "RejectExpressionValuesGuard":
        """Watch the attributes described by the given definitions."""
        return cls(definition.name for definition in definitions)

    @property
    def write_attribute_transformer(self) -> WriteAttributeGuard:
        return self._write_attribute_transformer

    def check_model(self, model: Mapping[str, TaggedValue]) -> frozenset[str]:
        return check_model(self.attribute_names, model)

    def transform_operation(
        self, context: Any, address: PathAddress, operation: Operation
    ) -> TransformedOperation:
        return evaluate_operation(self.attribute_names, operation)

    def transform_resource(
        self,
        context: TransformationContextInterface,
        address: PathAddress,
        resource: Resource,
    ) -> None:
        validate_resource(self.attribute_names, resource.model)
        DEFAULT_RESOURCE_TRANSFORMER.transform_resource(context, address, resource)
