"""Configuration for voicetask.

Values are read from the environment (a local `.env` file is loaded if present):
- VOICETASK_TIMEZONE: IANA timezone used for "now" when the caller doesn't inject one
- VOICETASK_LOG_LEVEL: log level for the command line entrypoint
"""

import logging
import os
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Unset means naive local time
TIMEZONE_NAME = os.getenv("VOICETASK_TIMEZONE", "")
LOG_LEVEL = os.getenv("VOICETASK_LOG_LEVEL", "WARNING").upper()


def get_timezone(name: Optional[str] = None) -> Optional[tzinfo]:
    """Resolve the configured timezone.

    Returns None (naive local time) when no timezone is configured or the name is unknown.
    """
    tz_name = TIMEZONE_NAME if name is None else name
    if not tz_name:
        return None
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {tz_name!r}; falling back to local time")
        return None


def current_time() -> datetime:
    """Return the reference "now" used when none is injected."""
    return datetime.now(get_timezone())
