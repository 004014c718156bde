"""Deterministic parser for voice task transcripts.

This module converts casual speech-to-text output into a ParsedTaskDraft.
It must be total and deterministic: every input (even empty) yields a fully
populated draft, and the same (transcript, now) always yields the same draft.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from voicetask.config import current_time
from voicetask.models.constants import DEFAULT_PRIORITY, DEFAULT_STATUS, DEFAULT_TITLE
from voicetask.models.draft import ParsedTaskDraft
from voicetask.models.task import TaskPriority, TaskStatus
from voicetask.parsing.due_date import extract_due_date

logger = logging.getLogger(__name__)

# Where a spoken title ends: a deadline, or a priority word
_TITLE_STOP = r"(?:\s+by\s+|\s+due\s+|\s+priority|\s+urgent|\s+high|\s+medium|\s+low|$)"

# Tried in order against the original-case transcript; first match wins
TITLE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"(?:create|add|make|new)\s+(?:a\s+)?(?:task\s+)?(?:to\s+)?(.+?)" + _TITLE_STOP, re.I),
    re.compile(r"(?:remind\s+me\s+to\s+)(.+?)" + _TITLE_STOP, re.I),
    re.compile(r"(?:need\s+to\s+|have\s+to\s+|should\s+)(.+?)" + _TITLE_STOP, re.I),
)

_PRIORITY_CLAUSE_RE = re.compile(r"\s+(it'?s|that'?s)\s+(high|low|medium|urgent)\s+priority", re.I)
_TRAILING_PRIORITY_RE = re.compile(r"\s+priority$", re.I)
_TASK_PREFIX_RE = re.compile(r"^(task\s+to\s+|task\s+)", re.I)

_LEAD_IN_RE = re.compile(r"^(create|add|make|new)\s+(a\s+)?(task\s+)?(to\s+)?", re.I)
_PRIORITY_PHRASE_RE = re.compile(r"\s+(high|low|medium|urgent)\s+priority", re.I)
_BY_DAY_RE = re.compile(
    r"\s+by\s+(tomorrow|today|tonight|monday|tuesday|wednesday|thursday|friday|saturday|sunday).*",
    re.I,
)

PRIORITY_RULES: Tuple[Tuple[re.Pattern, TaskPriority], ...] = (
    (re.compile(r"(urgent|critical|asap)", re.I), TaskPriority.URGENT),
    (re.compile(r"(high priority|important|high)", re.I), TaskPriority.HIGH),
    (re.compile(r"(low priority|low)", re.I), TaskPriority.LOW),
)

STATUS_RULES: Tuple[Tuple[re.Pattern, TaskStatus], ...] = (
    (re.compile(r"(in progress|working on|started)", re.I), TaskStatus.IN_PROGRESS),
    (re.compile(r"(done|completed|finished)", re.I), TaskStatus.DONE),
)


def _capitalize_first(text: str) -> str:
    """Upper-case the first character only (str.capitalize would lower the rest)."""
    return text[:1].upper() + text[1:]


def _clean_matched_title(raw: str) -> str:
    title = raw.strip()
    title = _PRIORITY_CLAUSE_RE.sub("", title)
    title = _TRAILING_PRIORITY_RE.sub("", title)
    title = _TASK_PREFIX_RE.sub("", title)
    return _capitalize_first(title)


def _fallback_title(transcript: str) -> str:
    cleaned = _LEAD_IN_RE.sub("", transcript, count=1)
    cleaned = _PRIORITY_PHRASE_RE.sub("", cleaned)
    cleaned = _BY_DAY_RE.sub("", cleaned)
    return _capitalize_first(cleaned.strip())


def extract_title(transcript: str) -> str:
    """Extract a task title, falling back to the cleaned transcript."""
    for pattern in TITLE_PATTERNS:
        m = pattern.search(transcript)
        if m and m.group(1):
            return _clean_matched_title(m.group(1)) or DEFAULT_TITLE
    return _fallback_title(transcript) or DEFAULT_TITLE


def extract_priority(text: str) -> TaskPriority:
    lower = text.lower()
    for pattern, priority in PRIORITY_RULES:
        if pattern.search(lower):
            return priority
    return DEFAULT_PRIORITY


def extract_status(text: str) -> TaskStatus:
    lower = text.lower()
    for pattern, status in STATUS_RULES:
        if pattern.search(lower):
            return status
    return DEFAULT_STATUS


def parse_voice_input(transcript: Optional[str], *, now: Optional[datetime] = None) -> ParsedTaskDraft:
    """Parse a voice transcript into a task draft.

    Args:
        transcript: Raw speech-to-text output (None is treated as empty)
        now: Reference instant for relative due dates (defaults to the configured clock)

    Returns:
        ParsedTaskDraft with title, priority and status always set

    Examples:
    - "Create a task to review the pull request by tomorrow" -> "Review the pull request", due tomorrow 17:00
    - "remind me to call mom next wednesday" -> due on the following Wednesday
    - "urgent low priority task" -> priority urgent
    """
    now = now or current_time()
    raw = transcript or ""

    draft = ParsedTaskDraft(
        title=extract_title(raw),
        priority=extract_priority(raw),
        status=extract_status(raw),
        due_date=extract_due_date(raw, now),
    )
    logger.debug(
        f"Parsed transcript {raw[:50]!r}: title={draft.title!r} priority={draft.priority} "
        f"status={draft.status} due={draft.due_date}"
    )
    return draft
