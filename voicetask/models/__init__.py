"""Data models for voicetask."""

from voicetask.models.task import TaskStatus, TaskPriority, CreateTaskInput
from voicetask.models.draft import ParsedTaskDraft, VoiceTaskInput

__all__ = [
    "TaskStatus",
    "TaskPriority",
    "CreateTaskInput",
    "ParsedTaskDraft",
    "VoiceTaskInput",
]
