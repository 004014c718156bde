"""Tests for the command line entrypoint."""

import json

import pytest

from voicetask.cli import main


def test_prints_draft_as_json(capsys):
    exit_code = main(["remind", "me", "to", "call", "mom", "by", "tomorrow", "--now", "2026-01-28T10:30:15"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "title": "Call mom",
        "priority": "medium",
        "status": "todo",
        "dueDate": "2026-01-29T17:00:00",
    }


def test_prints_payload(capsys):
    main(["--payload", "--now", "2026-01-28T10:30:15", "add pay rent urgent"])

    assert json.loads(capsys.readouterr().out) == {
        "title": "Pay rent",
        "status": "todo",
        "priority": "urgent",
    }


def test_missing_transcript_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_invalid_now_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["buy milk", "--now", "not-a-date"])

    assert exc_info.value.code == 2
