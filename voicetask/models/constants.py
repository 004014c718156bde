"""Constants for voicetask.

This module centralizes the defaults used when a transcript says nothing about a field.
"""

from voicetask.models.task import TaskPriority, TaskStatus


# Draft defaults
DEFAULT_TITLE = "New Task"
DEFAULT_PRIORITY = TaskPriority.MEDIUM
DEFAULT_STATUS = TaskStatus.TODO

# Time-of-day hours for "today" / "tomorrow"
MORNING_HOUR = 9
AFTERNOON_HOUR = 14
EVENING_HOUR = 18
END_OF_DAY_HOUR = 17  # No time-of-day keyword
