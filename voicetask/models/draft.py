"""Draft models produced by the voice parser."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from voicetask.models.constants import DEFAULT_PRIORITY, DEFAULT_STATUS, DEFAULT_TITLE
from voicetask.models.task import TaskPriority, TaskStatus


class ParsedTaskDraft(BaseModel):
    """Structured task fields parsed from a transcript, pending review.

    Title, priority and status are always populated; the due date is the
    only optional field.
    """

    title: str = Field(DEFAULT_TITLE, min_length=1, description="Task title (first letter capitalized)")
    priority: TaskPriority = Field(DEFAULT_PRIORITY, description="Parsed priority")
    status: TaskStatus = Field(DEFAULT_STATUS, description="Parsed status")
    due_date: Optional[datetime] = Field(None, alias="dueDate", description="Parsed due date")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True
        frozen = True


class VoiceTaskInput(BaseModel):
    """A transcript together with the fields parsed out of it."""

    transcript: str = Field(..., description="Raw speech-to-text transcript")
    parsed_title: str = Field(..., alias="parsedTitle")
    parsed_priority: TaskPriority = Field(..., alias="parsedPriority")
    parsed_due_date: Optional[datetime] = Field(None, alias="parsedDueDate")
    parsed_status: TaskStatus = Field(..., alias="parsedStatus")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True

    def to_draft(self) -> ParsedTaskDraft:
        """Return the parsed fields as a draft."""
        return ParsedTaskDraft(
            title=self.parsed_title,
            priority=self.parsed_priority,
            status=self.parsed_status,
            due_date=self.parsed_due_date,
        )
