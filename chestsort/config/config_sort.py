"""
Configuration for the sorting engine, its commands, and the interaction trigger.
"""

# --- Sorting Modes ---
SORT_MODE_ALPHA = "alpha"
SORT_MODE_COUNT = "count"
SORT_MODE_TYPE = "type"
SORT_MODES = (SORT_MODE_ALPHA, SORT_MODE_COUNT, SORT_MODE_TYPE)

# --- Defaults for a fresh SortSettings ---
DEFAULT_SORT_MODE = SORT_MODE_ALPHA
DEFAULT_VERBOSE = True
DEFAULT_ALLOW_SORT_WITHOUT_SNEAK = False

# --- Canonical Keys ---
KEY_SEPARATOR = ":"
KEY_FIELD_ASSIGN = "="
UNREADABLE_METADATA_MARKER = "!unreadable"
# Hex digits of the repr digest appended to the marker.
UNREADABLE_DIGEST_LENGTH = 12

# --- Verification ---
# When True, reconcile refuses to write a layout that cannot hold every item.
CAPACITY_PRECHECK = True
DIAGNOSTIC_REASON_MISMATCH = "count_mismatch"
DIAGNOSTIC_REASON_CAPACITY = "capacity"
DIAGNOSTIC_REASON_WRITE_ERROR = "write_error"
DIAGNOSTIC_REASON_SIZE_CHANGED = "size_changed"

# --- Permissions ---
OPERATOR_TAG = "operator"

# --- Event Names ---
EVENT_SORT_STARTED = "sort.started"
EVENT_SORT_SUCCEEDED = "sort.succeeded"
EVENT_SORT_FAILED = "sort.failed"
EVENT_SORT_ROLLED_BACK = "sort.rolled_back"
EVENT_SORT_ABORTED = "sort.aborted"
EVENT_SORT_FEEDBACK = "sort.feedback"
