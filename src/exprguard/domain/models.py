"""
Domain models for the expression guard.

Pure data structures describing configuration values, change requests and
the decisions attached to them. All models are immutable (frozen dataclasses)
so a value can be inspected from several threads without copying it first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from exprguard.domain import messages
from exprguard.domain.exceptions import MissingParameterError

# =============================================================================
# WELL-KNOWN IDENTIFIERS
# =============================================================================

OP = "operation"
OP_ADDR = "address"
NAME = "name"
VALUE = "value"
WRITE_ATTRIBUTE_OPERATION = "write-attribute"

# (type, value) pairs, outermost first
PathAddress = tuple[tuple[str, str], ...]
EMPTY_ADDRESS: PathAddress = ()


# =============================================================================
# TAGGED VALUES
# =============================================================================


class ValueKind(Enum):
    """Kind of a node in the configuration tree."""

    UNDEFINED = "undefined"
    STRING = "string"
    EXPRESSION = "expression"  # Unresolved ${...} placeholder
    LIST = "list"
    OBJECT = "object"  # Ordered (name, value) members
    PROPERTY = "property"  # Single (name, value) pair
    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"


@dataclass(frozen=True)
class TaggedValue:
    """
    One node of a configuration tree.

    The payload depends on the kind:

    - UNDEFINED: None
    - STRING, EXPRESSION: str
    - LIST: tuple[TaggedValue, ...]
    - OBJECT: tuple[tuple[str, TaggedValue], ...]
    - PROPERTY: tuple[str, TaggedValue]
    - BOOLEAN, INT, DOUBLE: the Python scalar
    """

    kind: ValueKind
    payload: Any = None

    @classmethod
    def undefined(cls) -> TaggedValue:
        return UNDEFINED

    @classmethod
    def string(cls, value: str) -> TaggedValue:
        return cls(ValueKind.STRING, value)

    @classmethod
    def expression(cls, value: str) -> TaggedValue:
        return cls(ValueKind.EXPRESSION, value)

    @classmethod
    def list_of(cls, *items: TaggedValue) -> TaggedValue:
        return cls(ValueKind.LIST, tuple(items))

    @classmethod
    def object_of(
        cls, members: Mapping[str, TaggedValue] | Iterable[tuple[str, TaggedValue]]
    ) -> TaggedValue:
        """Build an OBJECT value, keeping member order."""
        if isinstance(members, Mapping):
            members = members.items()
        return cls(ValueKind.OBJECT, tuple((name, value) for name, value in members))

    @classmethod
    def property_of(cls, name: str, value: TaggedValue) -> TaggedValue:
        return cls(ValueKind.PROPERTY, (name, value))

    @classmethod
    def boolean(cls, value: bool) -> TaggedValue:
        return cls(ValueKind.BOOLEAN, value)

    @classmethod
    def integer(cls, value: int) -> TaggedValue:
        return cls(ValueKind.INT, value)

    @classmethod
    def double(cls, value: float) -> TaggedValue:
        return cls(ValueKind.DOUBLE, value)

    @property
    def is_defined(self) -> bool:
        return self.kind is not ValueKind.UNDEFINED

    def as_string(self) -> str:
        if self.kind not in (ValueKind.STRING, ValueKind.EXPRESSION):
            raise TypeError(f"Cannot read a {self.kind.value} value as a string")
        result: str = self.payload
        return result

    def as_text(self) -> str:
        """
        Render a scalar value as text.

        Strings and expressions read as themselves, booleans as
        ``true``/``false`` and numbers in their usual decimal form.

        Raises:
            TypeError: If the value is undefined or structured
        """
        match self.kind:
            case ValueKind.STRING | ValueKind.EXPRESSION:
                return self.as_string()
            case ValueKind.BOOLEAN:
                return "true" if self.payload else "false"
            case ValueKind.INT | ValueKind.DOUBLE:
                return str(self.payload)
            case _:
                raise TypeError(f"Cannot render a {self.kind.value} value as text")

    def as_list(self) -> tuple[TaggedValue, ...]:
        if self.kind is not ValueKind.LIST:
            raise TypeError(f"Cannot read a {self.kind.value} value as a list")
        result: tuple[TaggedValue, ...] = self.payload
        return result

    def as_property_list(self) -> tuple[tuple[str, TaggedValue], ...]:
        if self.kind is not ValueKind.OBJECT:
            raise TypeError(f"Cannot read a {self.kind.value} value as an object")
        result: tuple[tuple[str, TaggedValue], ...] = self.payload
        return result

    def as_property(self) -> tuple[str, TaggedValue]:
        if self.kind is not ValueKind.PROPERTY:
            raise TypeError(f"Cannot read a {self.kind.value} value as a property")
        result: tuple[str, TaggedValue] = self.payload
        return result


UNDEFINED = TaggedValue(ValueKind.UNDEFINED)


# =============================================================================
# ATTRIBUTES, OPERATIONS AND RESOURCES
# =============================================================================


@dataclass(frozen=True)
class AttributeDefinition:
    """Descriptor of a resource attribute."""

    name: str
    kind: ValueKind = ValueKind.STRING


def _freeze(values: Mapping[str, TaggedValue]) -> Mapping[str, TaggedValue]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class Operation:
    """
    A change request addressed to one resource.

    ``parameters`` holds every request parameter except the operation name
    and the address, e.g. ``name`` and ``value`` for a write-attribute.
    """

    name: str
    address: PathAddress = EMPTY_ADDRESS
    parameters: Mapping[str, TaggedValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", tuple(self.address))
        object.__setattr__(self, "parameters", _freeze(self.parameters))

    def has_defined(self, parameter: str) -> bool:
        return self.get(parameter).is_defined

    def get(self, parameter: str) -> TaggedValue:
        """Parameter value, or UNDEFINED when absent."""
        return self.parameters.get(parameter, UNDEFINED)

    def require(self, parameter: str) -> TaggedValue:
        """
        Parameter value that must be present.

        Raises:
            MissingParameterError: If the parameter is absent
        """
        if parameter not in self.parameters:
            raise MissingParameterError(parameter)
        return self.parameters[parameter]


@dataclass(frozen=True)
class Resource:
    """Point-in-time snapshot of a resource's attribute values."""

    model: Mapping[str, TaggedValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "model", _freeze(self.model))


# =============================================================================
# DECISIONS
# =============================================================================


@dataclass(frozen=True)
class RejectionPolicy:
    """
    Deferred decision attached to an operation.

    A policy with offending attributes rejects the operation once it has
    executed successfully; the failure description is rendered on demand.
    """

    attributes: frozenset[str] = frozenset()

    @property
    def rejects(self) -> bool:
        return bool(self.attributes)

    def reject_operation(self, prepared_result: Any = None) -> bool:  # noqa: ARG002
        return self.rejects

    @property
    def failure_description(self) -> str | None:
        if not self.rejects:
            return None
        return messages.expression_not_allowed(self.attributes)


DEFAULT_REJECTION_POLICY = RejectionPolicy()

ResultTransformer = Callable[[Any], Any]


def original_result(result: Any) -> Any:
    """Result transform returning the result unchanged."""
    return result


ORIGINAL_RESULT: ResultTransformer = original_result


@dataclass(frozen=True)
class TransformedOperation:
    """Operation handed back to the pipeline with its policy and result transform."""

    operation: Operation
    rejection_policy: RejectionPolicy = DEFAULT_REJECTION_POLICY
    result_transformer: ResultTransformer = ORIGINAL_RESULT

    def reject_operation(self, prepared_result: Any = None) -> bool:
        return self.rejection_policy.reject_operation(prepared_result)

    @property
    def failure_description(self) -> str | None:
        return self.rejection_policy.failure_description

    def transform_result(self, result: Any) -> Any:
        return self.result_transformer(result)
