"""
Domain interfaces (Ports) for the transformation pipeline.

The pipeline walks the address space of configuration resources and hands
each resource and each operation to a transformer. These abstract base
classes define what a transformer must provide; they have no external
dependencies.
"""

from abc import ABC, abstractmethod
from typing import Any

from exprguard.domain.models import (
    Operation,
    PathAddress,
    Resource,
    TransformedOperation,
)


class TransformationContextInterface(ABC):
    """
    Port through which resource transformers hand back their output.
    """

    @abstractmethod
    def add_transformed_resource(
        self, address: PathAddress, resource: Resource
    ) -> None:
        """
        Record the transformed form of a resource.

        Args:
            address: Address of the resource
            resource: The resource to record
        """
        pass


class OperationTransformerInterface(ABC):
    """
    Port for operation transformation.

    Implementations inspect an operation before it is sent to a consumer and
    return it, possibly unmodified, together with a rejection policy and a
    result transform.
    """

    @abstractmethod
    def transform_operation(
        self, context: Any, address: PathAddress, operation: Operation
    ) -> TransformedOperation:
        """
        Transform an operation.

        Args:
            context: Pipeline-specific transformation context
            address: Address of the targeted resource
            operation: The proposed change

        Returns:
            TransformedOperation carrying the rejection decision

        Raises:
            TransformationFailedError: If the operation cannot be handled
        """
        pass


class ResourceTransformerInterface(ABC):
    """Port for resource transformation."""

    @abstractmethod
    def transform_resource(
        self,
        context: TransformationContextInterface,
        address: PathAddress,
        resource: Resource,
    ) -> None:
        """
        Transform a resource snapshot.

        Args:
            context: Receives the transformed resource
            address: Address of the resource
            resource: The snapshot to transform

        Raises:
            TransformationFailedError: If the resource cannot be transformed
        """
        pass


class DefaultResourceTransformer(ResourceTransformerInterface):
    """Pass-through transformer recording the resource unchanged."""

    def transform_resource(
        self,
        context: TransformationContextInterface,
        address: PathAddress,
        resource: Resource,
    ) -> None:
        context.add_transformed_resource(address, resource)


DEFAULT_RESOURCE_TRANSFORMER = DefaultResourceTransformer()
