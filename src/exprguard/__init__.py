"""
exprguard: reject unresolved expressions for literal-only consumers.

A stateless guard for configuration transformation pipelines. It inspects
attribute values, which may nest lists, objects and properties, for
unresolved ``${...}`` placeholders and either attaches a deferred rejection
policy to an operation or fails a resource snapshot outright.

Example:
    from exprguard import Operation, RejectExpressionValuesGuard, TaggedValue

    guard = RejectExpressionValuesGuard.from_names("host", "port")
    operation = Operation(
        name="write-attribute",
        parameters={
            "name": TaggedValue.string("host"),
            "value": TaggedValue.expression("${jboss.bind.address}"),
        },
    )
    transformed = guard.write_attribute_transformer.transform_operation(
        None, operation.address, operation
    )
    transformed.reject_operation()  # True
    transformed.failure_description  # names "host"
"""

# Domain exceptions
from exprguard.domain.exceptions import (
    ConfigurationError,
    MissingParameterError,
    TransformationFailedError,
    UnsupportedValueError,
)

# Domain interfaces (for type hints and custom transformers)
from exprguard.domain.interfaces import (
    DEFAULT_RESOURCE_TRANSFORMER,
    OperationTransformerInterface,
    ResourceTransformerInterface,
    TransformationContextInterface,
)

# Domain models (most commonly used)
from exprguard.domain.models import (
    DEFAULT_REJECTION_POLICY,
    ORIGINAL_RESULT,
    UNDEFINED,
    AttributeDefinition,
    Operation,
    RejectionPolicy,
    Resource,
    TaggedValue,
    TransformedOperation,
    ValueKind,
)

# Guards
from exprguard.guards import (
    RejectExpressionValuesGuard,
    WriteAttributeGuard,
    check_model,
    contains_expression,
)

# Infrastructure (explicit import encouraged for file loading)
from exprguard.infrastructure import (
    InMemoryTransformationContext,
    from_python,
    to_python,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "ValueKind",
    "TaggedValue",
    "UNDEFINED",
    "AttributeDefinition",
    "Operation",
    "Resource",
    "RejectionPolicy",
    "DEFAULT_REJECTION_POLICY",
    "ORIGINAL_RESULT",
    "TransformedOperation",
    # Domain interfaces
    "OperationTransformerInterface",
    "ResourceTransformerInterface",
    "TransformationContextInterface",
    "DEFAULT_RESOURCE_TRANSFORMER",
    # Domain exceptions
    "TransformationFailedError",
    "UnsupportedValueError",
    "MissingParameterError",
    "ConfigurationError",
    # Guards
    "contains_expression",
    "check_model",
    "RejectExpressionValuesGuard",
    "WriteAttributeGuard",
    # Infrastructure
    "from_python",
    "to_python",
    "InMemoryTransformationContext",
]
