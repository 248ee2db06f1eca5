"""Resource adapters exposing status conditions to the condition helpers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import kopf
from kubernetes import client

from . import config
from .conditions import Condition, condition, condition_mut, parse_time
from .logging import log_condition_event
from .protocols import HasStatusConditions, generation_of
from .utils.events import emit_condition_transition


def get_condition(resource: HasStatusConditions, type_: Any) -> Condition:
    """Get a copy of a resource's condition, or a default "Unknown" one."""
    return condition(resource.conditions, type_)


def get_condition_mut(resource: HasStatusConditions, type_: Any) -> Condition:
    """Get a resource's condition for writing, inserting it if missing."""
    conditions = resource.conditions
    if conditions is None:
        conditions = []
    found = condition_mut(conditions, type_)
    resource.conditions = conditions
    return found


class CustomResource:
    """Conditions of a custom resource handled by a kopf handler.

    Wraps the ``body`` a kopf handler receives. Conditions are parsed once;
    changes are written back with apply_to(). Events reference the whole
    object, so the body must carry apiVersion, kind and metadata.
    """

    def __init__(self, body: Mapping[str, Any]):
        """Initialize the adapter.

        Args:
            body: Kubernetes object as received by a kopf handler
        """
        self.body = body
        self.meta: Mapping[str, Any] = body.get("metadata") or {}
        self.kind = body.get("kind") or "CustomResource"
        self.logger = logging.getLogger(__name__)
        raw = (body.get("status") or {}).get("conditions") or []
        self._conditions = [Condition.from_dict(c) for c in raw]
        self._loaded = self._snapshot()

    def _snapshot(self) -> dict[str, dict[str, Any]]:
        return {c.type: c.to_dict() for c in self._conditions}

    @property
    def conditions(self) -> list[Condition]:
        return self._conditions

    @conditions.setter
    def conditions(self, value: list[Condition]) -> None:
        self._conditions = value

    @property
    def generation(self) -> int | None:
        return generation_of(self.meta)

    def condition(self, type_: Any) -> Condition:
        """Get a copy of the condition with the given type."""
        return get_condition(self, type_)

    def condition_mut(self, type_: Any) -> Condition:
        """Get the condition with the given type for writing."""
        return get_condition_mut(self, type_)

    def changed_conditions(self) -> list[Condition]:
        """Conditions added or modified since the resource was loaded or last applied."""
        return [c for c in self._conditions if self._loaded.get(c.type) != c.to_dict()]

    def apply_to(self, patch: kopf.Patch) -> list[Condition]:
        """Write the conditions into a kopf patch.

        Every changed condition is logged and, unless disabled through
        KUBE_CONDITIONS_EMIT_EVENTS, reported as a Kubernetes event.

        Args:
            patch: Kopf patch object

        Returns:
            The conditions that changed
        """
        changed = self.changed_conditions()
        patch.status["conditions"] = [c.to_dict() for c in self._conditions]

        for cond in changed:
            log_condition_event(
                self.logger,
                controller=config.get_controller_name(),
                resource_kind=self.kind,
                resource_name=self.meta.get("name", "unknown"),
                namespace=self.meta.get("namespace", "default"),
                uid=self.meta.get("uid", "unknown"),
                condition_type=cond.type,
                status=cond.status,
                reason=cond.reason,
                message=cond.message,
                observed_generation=cond.observed_generation,
            )
            if config.events_enabled():
                emit_condition_transition(self.body, cond)

        self._loaded = self._snapshot()
        return changed


class _CoreResourceConditions:
    """Read-only conditions of a core Kubernetes object.

    Core condition types carry no observed generation, and a missing
    transition time defaults to the current time.
    """

    def __init__(self, obj: Any):
        self.obj = obj

    @property
    def conditions(self) -> list[Condition]:
        status = self.obj.status
        raw = (status.conditions if status is not None else None) or []
        return [
            Condition(
                type=c.type,
                status=c.status,
                reason=c.reason or "",
                message=c.message or "",
                observed_generation=None,
                last_transition_time=parse_time(c.last_transition_time),
            )
            for c in raw
        ]

    @conditions.setter
    def conditions(self, value: list[Condition]) -> None:
        raise NotImplementedError(f"Mutating {type(self.obj).__name__} conditions is not supported")

    @property
    def generation(self) -> int | None:
        return generation_of(self.obj)


class PodConditions(_CoreResourceConditions):
    """Read-only conditions of a Pod."""

    def __init__(self, pod: client.V1Pod):
        super().__init__(pod)


class NodeConditions(_CoreResourceConditions):
    """Read-only conditions of a Node."""

    def __init__(self, node: client.V1Node):
        super().__init__(node)


def pod_condition(pod: client.V1Pod, type_: Any) -> Condition:
    """Get a copy of a Pod condition, or a default "Unknown" one."""
    return get_condition(PodConditions(pod), type_)


def node_condition(node: client.V1Node, type_: Any) -> Condition:
    """Get a copy of a Node condition, or a default "Unknown" one."""
    return get_condition(NodeConditions(node), type_)
