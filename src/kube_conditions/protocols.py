"""Capabilities a resource must expose to carry status conditions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .conditions import Condition


@runtime_checkable
class HasGeneration(Protocol):
    """Anything exposing the metadata generation of a resource."""

    @property
    def generation(self) -> int | None: ...


@runtime_checkable
class HasStatusConditions(HasGeneration, Protocol):
    """Anything exposing a mutable condition list and a metadata generation."""

    @property
    def conditions(self) -> list[Condition]: ...

    @conditions.setter
    def conditions(self, value: list[Condition]) -> None: ...


def generation_of(resource: Any) -> int | None:
    """Get the metadata generation of a resource.

    Accepts objects with a ``generation`` attribute, raw Kubernetes object
    dicts (``{"metadata": {"generation": ...}}``), metadata dicts, and
    kubernetes client models with ``metadata.generation``.

    Args:
        resource: Resource or metadata

    Returns:
        Generation, or None when the resource has none
    """
    if isinstance(resource, HasGeneration):
        return resource.generation
    if isinstance(resource, Mapping):
        meta = resource.get("metadata", resource)
        return meta.get("generation") if isinstance(meta, Mapping) else None
    metadata = getattr(resource, "metadata", None)
    if metadata is None:
        return None
    return getattr(metadata, "generation", None)
