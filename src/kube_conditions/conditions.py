"""Status conditions for resources managed by a reconciling controller.

A condition records one aspect of a resource's health ("Ready",
"Progressing", ...) as a tri-state status with a reason, a message, the
generation it was computed against, and the time it last transitioned.
The transition time only moves when one of status, reason, message or
observed generation actually changes, so setters can be called on every
reconcile pass without producing spurious transitions.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from operator import attrgetter
from typing import Any, Callable

from . import metrics
from .constants import (
    COND_READY,
    FIELD_LAST_TRANSITION_TIME,
    FIELD_MESSAGE,
    FIELD_OBSERVED_GENERATION,
    FIELD_REASON,
    FIELD_STATUS,
    FIELD_TYPE,
    REASON_NOT_READY,
    REASON_READY,
    STATUS_FALSE,
    STATUS_TRUE,
    STATUS_UNKNOWN,
    TIME_FORMAT,
)
from .protocols import generation_of
from .utils import clock
from .utils.errors import ConditionInvariantError, InvalidConditionStatusError

logger = logging.getLogger(__name__)

# Fractional seconds of any length; fromisoformat on 3.10 only takes 3 or 6 digits
_FRACTION = re.compile(r"\.(\d+)")


class ConditionStatus(str, Enum):
    """Tri-state status of a condition."""

    TRUE = STATUS_TRUE
    FALSE = STATUS_FALSE
    UNKNOWN = STATUS_UNKNOWN

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> ConditionStatus:
        """Map a canonical status string or bool to a ConditionStatus.

        Args:
            value: "True", "False", "Unknown", a ConditionStatus or a bool

        Returns:
            Matching ConditionStatus

        Raises:
            InvalidConditionStatusError: If the value is not recognized
        """
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        try:
            return cls(value)
        except ValueError:
            raise InvalidConditionStatusError(value) from None


def _to_str(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def format_time(value: datetime) -> str:
    """Format a datetime as RFC3339 with second precision, in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIME_FORMAT)


def parse_time(value: str | datetime | None) -> datetime:
    """Parse an RFC3339 timestamp; None yields the current time."""
    if value is None:
        return clock.now()
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Condition:
    """A single status condition of a resource."""

    type: str
    status: str = STATUS_UNKNOWN
    reason: str = ""
    message: str = ""
    observed_generation: int | None = None
    last_transition_time: datetime = field(default_factory=clock.now)

    def __post_init__(self) -> None:
        if isinstance(self.status, ConditionStatus):
            self.status = self.status.value
        self.type = _to_str(self.type)
        self.last_transition_time = parse_time(self.last_transition_time)

    @property
    def status_value(self) -> ConditionStatus | None:
        """Parsed status, or None when the stored string is not canonical."""
        try:
            return ConditionStatus.parse(self.status)
        except InvalidConditionStatusError:
            return None

    def is_true(self) -> bool:
        """Whether the condition has status "True"."""
        return self.status == STATUS_TRUE

    def is_false(self) -> bool:
        """Whether the condition has status "False"."""
        return self.status == STATUS_FALSE

    def is_unknown(self) -> bool:
        """Whether the condition has status "Unknown"."""
        return self.status == STATUS_UNKNOWN

    def has_reason(self, reason: Any) -> bool:
        """Whether the condition has the given reason."""
        return self.reason == _to_str(reason)

    def is_current(self, resource: Any) -> bool:
        """Whether the condition was computed against the resource's current generation."""
        return self.observed_generation == generation_of(resource)

    def set_true(self) -> Condition:
        """Set status to "True", updating lastTransitionTime if necessary."""
        return update_condition(self, _assign("status", STATUS_TRUE))

    def set_false(self) -> Condition:
        """Set status to "False", updating lastTransitionTime if necessary."""
        return update_condition(self, _assign("status", STATUS_FALSE))

    def set_unknown(self) -> Condition:
        """Set status to "Unknown", updating lastTransitionTime if necessary."""
        return update_condition(self, _assign("status", STATUS_UNKNOWN))

    def set_status(self, status: Any) -> Condition:
        """Set status from a bool, ConditionStatus or canonical string."""
        return update_condition(self, _assign("status", ConditionStatus.parse(status).value))

    def set_reason(self, reason: Any) -> Condition:
        """Set the reason, updating lastTransitionTime if necessary."""
        return update_condition(self, _assign("reason", _to_str(reason)))

    def set_message(self, message: Any) -> Condition:
        """Set the message, updating lastTransitionTime if necessary."""
        return update_condition(self, _assign("message", _to_str(message)))

    def set_generation_from(self, resource: Any) -> Condition:
        """Copy the resource's generation into observedGeneration.

        Updates lastTransitionTime if the generation differs.
        """
        return update_condition(self, _assign("observed_generation", generation_of(resource)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the Kubernetes wire representation."""
        data: dict[str, Any] = {
            FIELD_TYPE: self.type,
            FIELD_STATUS: self.status,
            FIELD_REASON: self.reason,
            FIELD_MESSAGE: self.message,
            FIELD_LAST_TRANSITION_TIME: format_time(self.last_transition_time),
        }
        if self.observed_generation is not None:
            data[FIELD_OBSERVED_GENERATION] = self.observed_generation
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Condition:
        """Build a condition from its Kubernetes wire representation.

        Unrecognized status strings are kept as-is.
        """
        return cls(
            type=data[FIELD_TYPE],
            status=data.get(FIELD_STATUS) or STATUS_UNKNOWN,
            reason=data.get(FIELD_REASON) or "",
            message=data.get(FIELD_MESSAGE) or "",
            observed_generation=data.get(FIELD_OBSERVED_GENERATION),
            last_transition_time=parse_time(data.get(FIELD_LAST_TRANSITION_TIME)),
        )


def _assign(name: str, value: Any) -> Callable[[Condition], None]:
    def transform(condition: Condition) -> None:
        setattr(condition, name, value)

    return transform


def _semantic_fields(condition: Condition) -> tuple[Any, ...]:
    return (
        condition.observed_generation,
        condition.reason,
        condition.status,
        condition.message,
    )


def update_condition(
    condition: Condition,
    transform: Callable[[Condition], None],
) -> Condition:
    """Apply a change to a condition, stamping lastTransitionTime only on real change.

    The transform is applied to a copy first. If observed generation,
    reason, status or message differ afterwards, the copy's fields are
    assigned to the condition and lastTransitionTime is set to the current
    time. Otherwise the condition is left untouched, timestamp included.

    Args:
        condition: Condition to update in place
        transform: Callable that mutates the condition it is given

    Returns:
        The same condition
    """
    candidate = copy.copy(condition)
    transform(candidate)
    if _semantic_fields(candidate) == _semantic_fields(condition):
        return condition

    previous = condition.last_transition_time
    for f in fields(condition):
        setattr(condition, f.name, getattr(candidate, f.name))
    # Never move the transition time backwards
    condition.last_transition_time = max(clock.now(), parse_time(previous))

    metrics.condition_transitions_total.labels(type=condition.type, status=condition.status).inc()
    logger.debug(
        "Condition %s transitioned: status=%s reason=%s observedGeneration=%s",
        condition.type,
        condition.status,
        condition.reason,
        condition.observed_generation,
    )
    return condition


def unknown_condition(type_: Any) -> Condition:
    """Create a condition with status "Unknown" and empty reason and message."""
    return Condition(type=_to_str(type_))


def _find(conditions: list[Condition], type_: str) -> Condition | None:
    for cond in conditions:
        if cond.type == type_:
            return cond
    return None


def condition(conditions: list[Condition] | None, type_: Any) -> Condition:
    """Get a copy of the condition with the given type.

    Returns a new "Unknown" condition if none exists. The list is never
    modified; the transition time of a defaulted condition is only
    meaningful once it is stored through condition_mut.

    Args:
        conditions: Existing conditions (may be None)
        type_: Condition type to look up (exact, case-sensitive match)

    Returns:
        Condition copy or default
    """
    name = _to_str(type_)
    found = _find(conditions or [], name)
    if found is None:
        return unknown_condition(name)
    return copy.copy(found)


def condition_mut(conditions: list[Condition], type_: Any) -> Condition:
    """Get the condition with the given type, inserting an "Unknown" one if missing.

    The list is sorted by type and duplicates are collapsed in place. An
    existing condition always wins over the inserted default, and of
    several pre-existing duplicates the first one is kept.

    Args:
        conditions: Condition list owned by the caller
        type_: Condition type

    Returns:
        The condition stored in the list

    Raises:
        ConditionInvariantError: If the condition cannot be found after insertion
    """
    name = _to_str(type_)
    if _find(conditions, name) is None:
        conditions.append(unknown_condition(name))
        metrics.condition_inserted_total.labels(type=name).inc()

    conditions.sort(key=attrgetter("type"))
    deduped: list[Condition] = []
    for cond in conditions:
        if deduped and deduped[-1].type == cond.type:
            continue
        deduped.append(cond)
    conditions[:] = deduped

    found = _find(conditions, name)
    if found is None:
        raise ConditionInvariantError(f"Condition {name!r} missing after insertion")
    return found


def set_condition(
    conditions: list[Condition],
    type_: Any,
    status: Any,
    reason: Any = "",
    message: Any = "",
    observed_generation: int | None = None,
) -> Condition:
    """Upsert a condition and set its fields in one call.

    Args:
        conditions: Condition list owned by the caller
        type_: Condition type
        status: Status as bool, ConditionStatus or canonical string
        reason: Reason for the condition
        message: Human-readable message
        observed_generation: Generation when condition was observed

    Returns:
        The stored condition
    """
    status_str = ConditionStatus.parse(status).value
    reason_str = _to_str(reason)
    message_str = _to_str(message)

    def transform(cond: Condition) -> None:
        cond.status = status_str
        cond.reason = reason_str
        cond.message = message_str
        if observed_generation is not None:
            cond.observed_generation = observed_generation

    return update_condition(condition_mut(conditions, type_), transform)


def set_ready_condition(
    conditions: list[Condition],
    status: bool,
    message: str,
    observed_generation: int | None = None,
) -> Condition:
    """Set the Ready condition."""
    return set_condition(
        conditions,
        COND_READY,
        status,
        REASON_READY if status else REASON_NOT_READY,
        message,
        observed_generation,
    )
