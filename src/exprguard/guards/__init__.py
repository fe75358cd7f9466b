"""
Guards for the transformation pipeline.

Guards inspect operations and resource snapshots bound for a consumer that
only understands literal values:
- detection: recursive expression detector and model checker (pure)
- reject_expressions: deferred (operations) and eager (resources) protocols
"""

from exprguard.guards.detection import (
    EXPRESSION_PATTERN,
    check_model,
    contains_expression,
    matches_expression,
)
from exprguard.guards.reject_expressions import (
    RejectExpressionValuesGuard,
    WriteAttributeGuard,
    evaluate_operation,
    evaluate_write_attribute,
    validate_resource,
)

__all__ = [
    # Detection (pure)
    "EXPRESSION_PATTERN",
    "matches_expression",
    "contains_expression",
    "check_model",
    # Protocols
    "evaluate_operation",
    "evaluate_write_attribute",
    "validate_resource",
    # Transformers
    "RejectExpressionValuesGuard",
    "WriteAttributeGuard",
]
