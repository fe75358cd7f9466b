"""
Infrastructure layer for the expression guard.

Adapters between the domain and the outside world: JSON encoding of tagged
values, file loading, and an in-memory pipeline context.
"""

from exprguard.infrastructure.codec import (
    from_python,
    model_from_python,
    model_to_python,
    to_python,
)
from exprguard.infrastructure.context import (
    InMemoryTransformationContext,
    format_address,
)
from exprguard.infrastructure.loader import (
    guard_from_config,
    load_guard_config,
    load_operation,
    load_resource,
    operation_from_python,
)

__all__ = [
    # Codec
    "from_python",
    "to_python",
    "model_from_python",
    "model_to_python",
    # Context
    "InMemoryTransformationContext",
    "format_address",
    # Loading
    "guard_from_config",
    "load_guard_config",
    "load_resource",
    "load_operation",
    "operation_from_python",
]
