"""Utilities for emitting Kubernetes events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import kopf

from ..constants import EVENT_TYPE_NORMAL, EVENT_TYPE_WARNING, STATUS_FALSE

if TYPE_CHECKING:
    from ..conditions import Condition


def emit_event(
    body: Mapping[str, Any],
    reason: str,
    message: str,
    type_: str = EVENT_TYPE_NORMAL,
) -> None:
    """Emit a Kubernetes event.

    Args:
        body: Kubernetes object the event is about
        reason: Event reason
        message: Event message
        type_: Event type (Normal or Warning)
    """
    kopf.event(
        body,
        reason=reason,
        message=message,
        type=type_,
    )


def emit_condition_transition(body: Mapping[str, Any], condition: Condition) -> None:
    """Emit an event describing a condition transition.

    False conditions are reported as warnings.
    """
    type_ = EVENT_TYPE_WARNING if condition.status == STATUS_FALSE else EVENT_TYPE_NORMAL
    message = f"{condition.type} is {condition.status}"
    if condition.message:
        message = f"{message}: {condition.message}"
    emit_event(body, condition.reason or condition.type, message, type_=type_)
