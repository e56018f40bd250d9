#!/usr/bin/env python3
"""
Lightweight template substitution utility for prompt files.

Usage:
  python3 scripts/subst.py --in <template> --out <output> KEY=VALUE [KEY=VALUE ...]

Replaces $KEY or ${ KEY } tokens in the template with the provided values
using stringtools.subst (unprovided tokens remain unchanged).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from stringtools import Bindings, subst
from stringtools.cli.commands.render import parse_kv


def main(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(description="Substitute $KEY tokens in a template file")
    ap.add_argument("--in", dest="src", required=True, help="Path to template file")
    ap.add_argument("--out", dest="dst", required=True, help="Path to output file")
    ap.add_argument("kv", nargs="*", help="KEY=VALUE pairs used for substitution")
    args = ap.parse_args(argv)

    src_path = Path(args.src)
    dst_path = Path(args.dst)

    if not src_path.exists():
        print(f"Template not found: {src_path}", file=sys.stderr)
        return 2

    try:
        values = parse_kv(args.kv)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        with src_path.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read template: {e}", file=sys.stderr)
        return 1

    rendered = subst(text, Bindings.mapping(values))

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        with dst_path.open("w", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as e:
        print(f"Failed to write output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
