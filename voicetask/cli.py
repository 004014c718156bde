"""Command line entrypoint: parse a transcript and print the result as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional

from voicetask import config
from voicetask.models.task_factory import create_task_input_from_draft, task_payload
from voicetask.parsing.voice_parser import parse_voice_input


def _parse_now(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO datetime: {value!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voicetask",
        description="Turn a voice transcript into a task draft",
    )
    parser.add_argument("transcript", nargs="+", help="Transcript text (words are joined with spaces)")
    parser.add_argument("--now", type=_parse_now, default=None, help="Reference time (ISO-8601)")
    parser.add_argument(
        "--payload",
        action="store_true",
        help="Print the task-creation payload instead of the draft",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_arg_parser().parse_args(argv)

    draft = parse_voice_input(" ".join(args.transcript), now=args.now)
    if args.payload:
        output = task_payload(create_task_input_from_draft(draft))
    else:
        output = draft.model_dump(mode="json", by_alias=True)

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
