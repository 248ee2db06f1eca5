"""Tests for Prometheus metrics."""

from __future__ import annotations

from prometheus_client import REGISTRY

from kube_conditions.conditions import Condition, condition_mut
from kube_conditions.metrics import condition_inserted_total, condition_transitions_total


def sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricsExist:
    """Test that all expected metrics are defined."""

    def test_condition_transitions_total_exists(self):
        """Test condition_transitions_total counter exists."""
        # Prometheus counters don't include "_total" in their _name attribute
        assert condition_transitions_total._name == "kube_conditions_transitions"

    def test_condition_inserted_total_exists(self):
        """Test condition_inserted_total counter exists."""
        assert condition_inserted_total._name == "kube_conditions_inserted"


class TestMetricsRecorded:
    """Test that condition operations record metrics."""

    def test_transition_counted(self):
        """Test a real transition increments the counter once."""
        labels = {"type": "MetricsTransition", "status": "True"}
        before = sample("kube_conditions_transitions_total", labels)
        cond = Condition(type="MetricsTransition")

        cond.set_true()
        cond.set_true()

        assert sample("kube_conditions_transitions_total", labels) == before + 1

    def test_insert_counted(self):
        """Test inserting a condition increments the counter once."""
        labels = {"type": "MetricsInsert"}
        before = sample("kube_conditions_inserted_total", labels)
        conditions: list[Condition] = []

        condition_mut(conditions, "MetricsInsert")
        condition_mut(conditions, "MetricsInsert")

        assert sample("kube_conditions_inserted_total", labels) == before + 1
