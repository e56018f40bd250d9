"""Subst and vars command implementations."""

import logging
import sys
from argparse import Namespace
from typing import Dict, List, Optional

from stringtools.config import Settings
from stringtools.variables import Bindings, subst, subst_vars

from .common import read_input, run_command, write_output


logger = logging.getLogger(__name__)


def parse_kv(pairs: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse KEY=VALUE pairs.

    Raises:
        ValueError: If a pair has no '=' or an empty key
    """
    values: Dict[str, str] = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Invalid KV (expected KEY=VALUE): {pair}")
        k, v = pair.split('=', 1)
        if not k:
            raise ValueError(f"Invalid KEY in pair: {pair}")
        values[k] = v
    return values


def run_subst(args: Namespace) -> int:
    """Render a template with the KEY=VALUE pairs from the command line."""
    def body(settings: Optional[Settings]) -> int:
        try:
            values = parse_kv(args.kv)
        except ValueError as e:
            logger.error(str(e))
            return 2

        text = read_input(args)
        missing = [name for name in subst_vars(text, settings=settings) if name not in values]
        if missing:
            logger.info(f"Left unsubstituted: {missing}")

        write_output(args, subst(text, Bindings.mapping(values), settings=settings))
        return 0

    return run_command(args, body)


def run_vars(args: Namespace) -> int:
    """Print the variables referenced by a template, one per line."""
    def body(settings: Optional[Settings]) -> int:
        for name in subst_vars(read_input(args), settings=settings):
            sys.stdout.write(name + '\n')
        return 0

    return run_command(args, body)
