#!/usr/bin/env python3
"""Run script for voicetask."""

import sys

from voicetask.cli import main

if __name__ == "__main__":
    sys.exit(main())
