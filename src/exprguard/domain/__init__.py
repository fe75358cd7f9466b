"""
Domain layer for the expression guard.

Contains the configuration data model and the pipeline ports, with no
external dependencies.
"""

from exprguard.domain.exceptions import (
    ConfigurationError,
    MissingParameterError,
    TransformationFailedError,
    UnsupportedValueError,
)
from exprguard.domain.interfaces import (
    DEFAULT_RESOURCE_TRANSFORMER,
    DefaultResourceTransformer,
    OperationTransformerInterface,
    ResourceTransformerInterface,
    TransformationContextInterface,
)
from exprguard.domain.models import (
    DEFAULT_REJECTION_POLICY,
    EMPTY_ADDRESS,
    NAME,
    ORIGINAL_RESULT,
    UNDEFINED,
    VALUE,
    WRITE_ATTRIBUTE_OPERATION,
    AttributeDefinition,
    Operation,
    PathAddress,
    RejectionPolicy,
    Resource,
    TaggedValue,
    TransformedOperation,
    ValueKind,
)

__all__ = [
    # Models
    "ValueKind",
    "TaggedValue",
    "UNDEFINED",
    "AttributeDefinition",
    "Operation",
    "PathAddress",
    "EMPTY_ADDRESS",
    "Resource",
    "RejectionPolicy",
    "DEFAULT_REJECTION_POLICY",
    "ORIGINAL_RESULT",
    "TransformedOperation",
    # Identifiers
    "NAME",
    "VALUE",
    "WRITE_ATTRIBUTE_OPERATION",
    # Interfaces
    "OperationTransformerInterface",
    "ResourceTransformerInterface",
    "TransformationContextInterface",
    "DefaultResourceTransformer",
    "DEFAULT_RESOURCE_TRANSFORMER",
    # Exceptions
    "TransformationFailedError",
    "UnsupportedValueError",
    "MissingParameterError",
    "ConfigurationError",
]
