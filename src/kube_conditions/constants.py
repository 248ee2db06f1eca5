"""Constants for kube-conditions."""

# Condition Status Values
STATUS_TRUE = "True"
STATUS_FALSE = "False"
STATUS_UNKNOWN = "Unknown"

# Condition Types
COND_READY = "Ready"

# Common Condition Reasons
REASON_READY = "Ready"
REASON_NOT_READY = "NotReady"

# Condition Wire Fields
FIELD_TYPE = "type"
FIELD_STATUS = "status"
FIELD_REASON = "reason"
FIELD_MESSAGE = "message"
FIELD_OBSERVED_GENERATION = "observedGeneration"
FIELD_LAST_TRANSITION_TIME = "lastTransitionTime"

# RFC3339 layout used by metav1.Time
TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Event Types
EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"

# Controller name used in structured logs
DEFAULT_CONTROLLER_NAME = "kube-conditions"
