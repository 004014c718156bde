"""Task creation factory for voicetask.

Turns a reviewed draft into the payload for the task-creation API.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from voicetask.models.draft import ParsedTaskDraft
from voicetask.models.task import CreateTaskInput, TaskPriority, TaskStatus


def create_task_input_from_draft(
    draft: ParsedTaskDraft,
    title: Optional[str] = None,
    description: Optional[str] = None,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    due_date: Optional[datetime] = None,
    clear_due_date: bool = False,
) -> CreateTaskInput:
    """Build a CreateTaskInput from a draft plus the user's review edits.

    Args:
        draft: Parsed draft shown in the review step
        title: Edited title (None keeps the draft title)
        description: Optional description added during review
        status: Edited status (None keeps the draft status)
        priority: Edited priority (None keeps the draft priority)
        due_date: Edited due date (None keeps the draft due date)
        clear_due_date: Drop the due date entirely

    Returns:
        Validated CreateTaskInput

    Raises:
        pydantic.ValidationError: If the edited values are invalid (e.g. empty title)
    """
    if clear_due_date:
        resolved_due_date = None
    else:
        resolved_due_date = due_date if due_date is not None else draft.due_date

    return CreateTaskInput(
        title=title if title is not None else draft.title,
        description=description,
        status=status if status is not None else draft.status,
        priority=priority if priority is not None else draft.priority,
        due_date=resolved_due_date,
    )


def task_payload(task_input: CreateTaskInput) -> Dict[str, Any]:
    """Serialize a CreateTaskInput the way the task API expects it.

    Uses camelCase ``dueDate`` (ISO-8601) and omits absent fields.
    """
    return task_input.model_dump(mode="json", by_alias=True, exclude_none=True)
