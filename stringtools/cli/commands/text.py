"""Trim, shrink and stitch command implementations."""

import sys
from argparse import Namespace
from typing import Optional

from stringtools.config import Settings
from stringtools.text import shrink, stitcher, trim, trim_lines

from .common import read_input, run_command, write_output


def run_trim(args: Namespace) -> int:
    """Trim the input as a whole or line by line."""
    def body(settings: Optional[Settings]) -> int:
        trimmer = trim_lines if args.lines else trim
        text = read_input(args)
        write_output(args, trimmer(text, args.lead, args.rear, settings=settings))
        return 0

    return run_command(args, body)


def run_shrink(args: Namespace) -> int:
    def body(settings: Optional[Settings]) -> int:
        write_output(args, shrink(read_input(args), settings=settings))
        return 0

    return run_command(args, body)


def run_stitch(args: Namespace) -> int:
    def body(settings: Optional[Settings]) -> int:
        sys.stdout.write(stitcher(args.thread, *args.items, settings=settings) + '\n')
        return 0

    return run_command(args, body)
