"""Due-date extraction for voice transcripts.

Every rule takes the lower-cased transcript and the reference "now" and returns
a datetime or None. Rules are evaluated in order; the first hit wins.
Digits and word boundaries are ASCII-only.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from voicetask.models.constants import (
    AFTERNOON_HOUR,
    END_OF_DAY_HOUR,
    EVENING_HOUR,
    MORNING_HOUR,
)

logger = logging.getLogger(__name__)

DueDateRule = Callable[[str, datetime], Optional[datetime]]

# Sunday first: weekday offsets are computed with Sunday=0 .. Saturday=6
DAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

TIME_OF_DAY_RULES: Tuple[Tuple[re.Pattern, int], ...] = (
    (re.compile(r"evening|tonight"), EVENING_HOUR),
    (re.compile(r"morning"), MORNING_HOUR),
    (re.compile(r"afternoon"), AFTERNOON_HOUR),
)

_TODAY_RE = re.compile(r"\btoday\b", re.ASCII)
_TOMORROW_RE = re.compile(r"\btomorrow\b", re.ASCII)
_IN_DAYS_RE = re.compile(r"in (\d+) days?", re.ASCII)
_IN_WEEKS_RE = re.compile(r"in (\d+) weeks?", re.ASCII)
_IN_MONTHS_RE = re.compile(r"in (\d+) months?", re.ASCII)
_WEEKDAY_RE = re.compile(
    r"\b(next|this)?\s*(" + "|".join(DAY_NAMES[1:] + DAY_NAMES[:1]) + r")\b", re.ASCII
)
_MONTH_DAY_RES = tuple(
    re.compile(r"(\d{1,2})(?:st|nd|rd|th)?\s+" + name, re.I | re.ASCII) for name in MONTH_NAMES
)


def time_of_day_hour(text: str) -> int:
    """Hour implied by a time-of-day keyword (end of day if none)."""
    for pattern, hour in TIME_OF_DAY_RULES:
        if pattern.search(text):
            return hour
    return END_OF_DAY_HOUR


def _at_hour(day: datetime, hour: int) -> datetime:
    return day.replace(hour=hour, minute=0, second=0, microsecond=0)


def sunday_based_weekday(day: datetime) -> int:
    """Weekday numbered Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def add_months(day: datetime, months: int) -> datetime:
    """Advance by calendar months, clamping the day to the target month's length."""
    total = day.month - 1 + months
    year = day.year + total // 12
    month = total % 12 + 1
    if year > datetime.max.year:
        raise OverflowError("date value out of range")
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def _today(text: str, now: datetime) -> Optional[datetime]:
    if not _TODAY_RE.search(text):
        return None
    return _at_hour(now, time_of_day_hour(text))


def _tomorrow(text: str, now: datetime) -> Optional[datetime]:
    if not _TOMORROW_RE.search(text):
        return None
    return _at_hour(now + timedelta(days=1), time_of_day_hour(text))


def _relative(pattern: re.Pattern, advance: Callable[[datetime, int], datetime]) -> DueDateRule:
    def rule(text: str, now: datetime) -> Optional[datetime]:
        m = pattern.search(text)
        if not m:
            return None
        return advance(now, int(m.group(1)))
    return rule


def _weekday(text: str, now: datetime) -> Optional[datetime]:
    m = _WEEKDAY_RE.search(text)
    if not m:
        return None
    days_to_add = DAY_NAMES.index(m.group(2)) - sunday_based_weekday(now)
    # "this <today>" also lands here and jumps a full week
    if days_to_add <= 0 or m.group(1) == "next":
        days_to_add += 7
    return now + timedelta(days=days_to_add)


def _month_day(text: str, now: datetime) -> Optional[datetime]:
    # Month order decides ties; uses the current year even if the date has passed
    for month_index, pattern in enumerate(_MONTH_DAY_RES):
        m = pattern.search(text)
        if m:
            first = datetime(now.year, month_index + 1, 1, tzinfo=now.tzinfo)
            # Day 0 and days past the month's end roll into the neighbouring month
            return first + timedelta(days=int(m.group(1)) - 1)
    return None


DUE_DATE_RULES: Tuple[Tuple[str, DueDateRule], ...] = (
    ("today", _today),
    ("tomorrow", _tomorrow),
    ("in_days", _relative(_IN_DAYS_RE, lambda now, n: now + timedelta(days=n))),
    ("in_weeks", _relative(_IN_WEEKS_RE, lambda now, n: now + timedelta(weeks=n))),
    ("in_months", _relative(_IN_MONTHS_RE, add_months)),
    ("weekday", _weekday),
    ("month_day", _month_day),
)


def extract_due_date(text: str, now: datetime) -> Optional[datetime]:
    """Extract a due date from a transcript relative to ``now``.

    Args:
        text: Transcript (matched case-insensitively)
        now: Reference instant; its timezone is preserved

    Returns:
        The first rule's result, or None if no rule matches
    """
    lower = (text or "").lower()
    for name, rule in DUE_DATE_RULES:
        try:
            due = rule(lower, now)
        except (OverflowError, ValueError):
            # e.g. "in 99999999999 days", or a digit run past int()'s conversion limit;
            # the next rule still gets a chance
            logger.debug(f"Due date rule {name} is out of the supported date range; skipping")
            continue
        if due is not None:
            logger.debug(f"Due date rule {name} matched: {due.isoformat()}")
            return due
    return None
