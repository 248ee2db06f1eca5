"""Status conditions for Kubernetes resources managed by a controller."""

from .conditions import (
    Condition,
    ConditionStatus,
    condition,
    condition_mut,
    set_condition,
    set_ready_condition,
    unknown_condition,
    update_condition,
)
from .protocols import HasGeneration, HasStatusConditions
from .resources import (
    CustomResource,
    NodeConditions,
    PodConditions,
    get_condition,
    get_condition_mut,
    node_condition,
    pod_condition,
)

__all__ = [
    "Condition",
    "ConditionStatus",
    "condition",
    "condition_mut",
    "update_condition",
    "unknown_condition",
    "set_condition",
    "set_ready_condition",
    "HasGeneration",
    "HasStatusConditions",
    "CustomResource",
    "PodConditions",
    "NodeConditions",
    "get_condition",
    "get_condition_mut",
    "pod_condition",
    "node_condition",
]
