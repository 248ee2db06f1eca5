"""Structured logging configuration for kube-conditions."""

import json
import logging
import sys
from typing import Any

from .config import get_log_level


def setup_structured_logging() -> None:
    """Configure structured JSON logging."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_condition_event(
    logger: logging.Logger,
    controller: str,
    resource_kind: str,
    resource_name: str,
    namespace: str,
    uid: str,
    condition_type: str,
    status: str,
    reason: str,
    message: str,
    **kwargs: Any,
) -> None:
    """Log a structured condition event."""
    log_data = {
        "controller": controller,
        "resource": resource_kind,
        "name": resource_name,
        "namespace": namespace,
        "uid": uid,
        "condition": condition_type,
        "status": status,
        "reason": reason,
        "message": message,
    }
    log_data.update(kwargs)
    logger.info(json.dumps(log_data, default=str))
