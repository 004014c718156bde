"""Voice transcript parsing for voicetask."""

from voicetask.parsing.voice_parser import (
    parse_voice_input,
    extract_title,
    extract_priority,
    extract_status,
)
from voicetask.parsing.due_date import extract_due_date
from voicetask.parsing.interpret import interpret_voice_input

__all__ = [
    "parse_voice_input",
    "extract_title",
    "extract_priority",
    "extract_status",
    "extract_due_date",
    "interpret_voice_input",
]
