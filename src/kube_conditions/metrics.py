"""Prometheus metrics for kube-conditions."""

from prometheus_client import Counter

# Condition metrics
condition_transitions_total = Counter(
    "kube_conditions_transitions_total",
    "Total number of condition transitions",
    ["type", "status"],
)

condition_inserted_total = Counter(
    "kube_conditions_inserted_total",
    "Total number of conditions inserted with status Unknown",
    ["type"],
)
