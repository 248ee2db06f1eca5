"""Tests for structured logging and configuration."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock, patch

from kube_conditions import config
from kube_conditions.logging import log_condition_event, setup_structured_logging


class TestLogConditionEvent:
    """Test cases for log_condition_event."""

    def test_logs_json(self):
        """Test the record is a single JSON object."""
        logger = MagicMock()

        log_condition_event(
            logger,
            controller="test-controller",
            resource_kind="Widget",
            resource_name="w1",
            namespace="default",
            uid="uid-1",
            condition_type="Ready",
            status="True",
            reason="Done",
            message="ok",
            observed_generation=3,
        )

        data = json.loads(logger.info.call_args[0][0])
        assert data == {
            "controller": "test-controller",
            "resource": "Widget",
            "name": "w1",
            "namespace": "default",
            "uid": "uid-1",
            "condition": "Ready",
            "status": "True",
            "reason": "Done",
            "message": "ok",
            "observed_generation": 3,
        }

    @patch("kube_conditions.logging.logging.basicConfig")
    def test_setup_uses_configured_level(self, mock_basic_config, monkeypatch):
        """Test setup_structured_logging honours KUBE_CONDITIONS_LOG_LEVEL."""
        monkeypatch.setenv("KUBE_CONDITIONS_LOG_LEVEL", "debug")

        setup_structured_logging()

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


class TestConfig:
    """Test cases for environment configuration."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is set."""
        monkeypatch.delenv("KUBE_CONDITIONS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("KUBE_CONDITIONS_EMIT_EVENTS", raising=False)
        monkeypatch.delenv("KUBE_CONDITIONS_CONTROLLER_NAME", raising=False)

        assert config.get_log_level() == logging.INFO
        assert config.events_enabled() is True
        assert config.get_controller_name() == "kube-conditions"

    def test_unknown_log_level_falls_back(self, monkeypatch):
        """Test an unrecognized level falls back to INFO."""
        monkeypatch.setenv("KUBE_CONDITIONS_LOG_LEVEL", "chatty")
        assert config.get_log_level() == logging.INFO

    def test_events_disabled(self, monkeypatch):
        """Test events can be turned off."""
        monkeypatch.setenv("KUBE_CONDITIONS_EMIT_EVENTS", "FALSE")
        assert config.events_enabled() is False

    def test_controller_name(self, monkeypatch):
        """Test the controller name can be overridden."""
        monkeypatch.setenv("KUBE_CONDITIONS_CONTROLLER_NAME", "widget-operator")
        assert config.get_controller_name() == "widget-operator"
