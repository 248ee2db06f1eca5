"""Utility functions for kube-conditions."""

from .clock import now, reset_clock, set_clock, with_clock
from .errors import (
    ConditionInvariantError,
    InvalidConditionStatusError,
    KubeConditionsError,
)
from .events import emit_condition_transition, emit_event

__all__ = [
    "now",
    "set_clock",
    "reset_clock",
    "with_clock",
    "KubeConditionsError",
    "InvalidConditionStatusError",
    "ConditionInvariantError",
    "emit_event",
    "emit_condition_transition",
]
