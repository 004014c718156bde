"""Tests for draft and task models."""

import pytest
from datetime import datetime
from pydantic import ValidationError

from voicetask.models.draft import ParsedTaskDraft, VoiceTaskInput
from voicetask.models.task import CreateTaskInput, TaskPriority, TaskStatus


class TestParsedTaskDraft:
    """Draft defaults, aliases and immutability."""

    def test_defaults(self):
        draft = ParsedTaskDraft()

        assert draft.title == "New Task"
        assert draft.priority == TaskPriority.MEDIUM
        assert draft.status == TaskStatus.TODO
        assert draft.due_date is None

    def test_accepts_camel_case_due_date(self):
        due = datetime(2026, 3, 21)
        draft = ParsedTaskDraft(title="Pay rent", dueDate=due)

        assert draft.due_date == due

    def test_serializes_with_alias(self):
        draft = ParsedTaskDraft(title="Pay rent", priority="high", due_date=datetime(2026, 3, 21, 9, 0))

        assert draft.model_dump(mode="json", by_alias=True) == {
            "title": "Pay rent",
            "priority": "high",
            "status": "todo",
            "dueDate": "2026-03-21T09:00:00",
        }

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            ParsedTaskDraft(title="")

    def test_unknown_priority_rejected(self):
        with pytest.raises(ValidationError):
            ParsedTaskDraft(title="x", priority="someday")

    def test_draft_is_immutable(self):
        draft = ParsedTaskDraft(title="Pay rent")

        with pytest.raises(ValidationError):
            draft.title = "Other"


class TestVoiceTaskInput:
    def test_to_draft(self):
        voice_input = VoiceTaskInput(
            transcript="add pay rent by friday",
            parsed_title="Pay rent",
            parsed_priority=TaskPriority.LOW,
            parsed_status=TaskStatus.TODO,
            parsed_due_date=datetime(2026, 1, 30),
        )

        assert voice_input.to_draft() == ParsedTaskDraft(
            title="Pay rent",
            priority="low",
            status="todo",
            due_date=datetime(2026, 1, 30),
        )


class TestCreateTaskInput:
    def test_defaults(self):
        task_input = CreateTaskInput(title="Pay rent")

        assert task_input.status == TaskStatus.TODO
        assert task_input.priority == TaskPriority.MEDIUM
        assert task_input.description is None
        assert task_input.due_date is None
