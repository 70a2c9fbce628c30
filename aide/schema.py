"""Valid field values for stored records."""

VALID_TASK_STATUS = {"created", "in_progress", "completed"}
DEFAULT_TASK_STATUS = "created"

VALID_AIDE_TYPES = ("text", "file")
DEFAULT_AIDE_TYPE = "text"

MIN_PRIORITY = 1  # highest
MAX_PRIORITY = 5  # lowest
DEFAULT_PRIORITY = 3

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
