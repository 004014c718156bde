"""Task enumerations and the task-creation payload for voicetask."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Limits enforced by the task-creation API
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000


class TaskStatus(str, Enum):
    """Task status enumeration (board columns)."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class CreateTaskInput(BaseModel):
    """Payload accepted by the task-creation API.

    Title and description are trimmed before their length limits are checked,
    so a whitespace-only title is rejected.
    """

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Task title")
    description: Optional[str] = Field(
        None, max_length=MAX_DESCRIPTION_LENGTH, description="Task description"
    )
    status: TaskStatus = Field(TaskStatus.TODO, description="Task status")
    priority: TaskPriority = Field(TaskPriority.MEDIUM, description="Task priority")
    due_date: Optional[datetime] = Field(None, alias="dueDate", description="Task due date")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True

    @field_validator("title", "description", mode="before")
    @classmethod
    def _strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v
