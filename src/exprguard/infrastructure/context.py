"""
In-memory implementation of the resource transformation context.

Useful for testing and for one-shot validation from the command line.
"""

from exprguard.domain.interfaces import TransformationContextInterface
from exprguard.domain.models import PathAddress, Resource


class InMemoryTransformationContext(TransformationContextInterface):
    """Collects transformed resources in the order they were added."""

    def __init__(self) -> None:
        self._resources: dict[PathAddress, Resource] = {}

    def add_transformed_resource(
        self, address: PathAddress, resource: Resource
    ) -> None:
        self._resources[tuple(address)] = resource

    def get_resource(self, address: PathAddress) -> Resource:
        if tuple(address) not in self._resources:
            raise KeyError(f"Resource not found: {format_address(address)}")
        return self._resources[tuple(address)]

    @property
    def addresses(self) -> list[PathAddress]:
        return list(self._resources)

    def __len__(self) -> int:
        return len(self._resources)


def format_address(address: PathAddress) -> str:
    """Render an address as ``/type=value/...`` (``/`` for the root)."""
    if not address:
        return "/"
    return "".join(f"/{key}={value}" for key, value in address)
