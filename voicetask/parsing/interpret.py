"""High-level interpretation for voice task input.

This module is the single entrypoint used by a review UI.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from voicetask.models.draft import VoiceTaskInput
from voicetask.parsing.voice_parser import parse_voice_input

logger = logging.getLogger(__name__)


def interpret_voice_input(transcript: Optional[str], *, now: Optional[datetime] = None) -> VoiceTaskInput:
    """Parse a transcript and attach the parsed fields to it for review."""
    transcript = transcript or ""
    draft = parse_voice_input(transcript, now=now)
    logger.debug(
        f"Interpreted voice input ({len(transcript)} chars): "
        f"due date {'found' if draft.due_date is not None else 'not found'}"
    )
    return VoiceTaskInput(
        transcript=transcript,
        parsed_title=draft.title,
        parsed_priority=draft.priority,
        parsed_due_date=draft.due_date,
        parsed_status=draft.status,
    )
