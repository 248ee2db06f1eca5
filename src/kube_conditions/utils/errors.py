"""Exception types for kube-conditions."""


class KubeConditionsError(Exception):
    """Base class for all kube-conditions errors."""


class InvalidConditionStatusError(KubeConditionsError, ValueError):
    """Raised when a status string is not one of "True", "False" or "Unknown"."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid condition status: {value!r}")


class ConditionInvariantError(KubeConditionsError, AssertionError):
    """Raised when the condition list no longer holds an entry it must hold.

    This indicates a logic error, not bad input, and is never caught by
    this library.
    """
