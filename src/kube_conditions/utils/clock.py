"""Injectable wall clock used to stamp condition transition times."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# Context variable for storing the active clock
current_clock: contextvars.ContextVar[Clock] = contextvars.ContextVar("clock", default=utc_now)


def now() -> datetime:
    """Get the current time from the active clock.

    Naive datetimes returned by a custom clock are treated as UTC.

    Returns:
        Timezone-aware datetime
    """
    value = current_clock.get()()
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def set_clock(fn: Clock) -> contextvars.Token[Clock]:
    """Set the clock in the current context.

    Args:
        fn: Callable returning the current time

    Returns:
        Token that can be passed to reset_clock
    """
    return current_clock.set(fn)


def reset_clock(token: contextvars.Token[Clock] | None = None) -> None:
    """Restore the previous clock, or the system clock when no token is given."""
    if token is None:
        current_clock.set(utc_now)
    else:
        current_clock.reset(token)


@contextmanager
def with_clock(fn: Clock) -> Iterator[Clock]:
    """Context manager to use a clock for the duration of a block.

    Args:
        fn: Callable returning the current time

    Yields:
        The clock
    """
    token = current_clock.set(fn)
    try:
        yield fn
    finally:
        current_clock.reset(token)
