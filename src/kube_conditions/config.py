"""Environment-driven configuration for kube-conditions."""

from __future__ import annotations

import logging
import os

from .constants import DEFAULT_CONTROLLER_NAME


def get_log_level() -> int:
    """Get the log level from KUBE_CONDITIONS_LOG_LEVEL.

    Returns:
        Logging level, INFO when unset or unrecognized
    """
    name = os.getenv("KUBE_CONDITIONS_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def events_enabled() -> bool:
    """Whether Kubernetes events are emitted for condition transitions."""
    return os.getenv("KUBE_CONDITIONS_EMIT_EVENTS", "true").lower() != "false"


def get_controller_name() -> str:
    """Get the controller name reported in structured logs."""
    return os.getenv("KUBE_CONDITIONS_CONTROLLER_NAME", DEFAULT_CONTROLLER_NAME)
