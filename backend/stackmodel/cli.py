"""
stackmodel CLI: inspect an error blob.

Usage:
    stackmodel trace.txt
    node app.js 2>&1 | stackmodel --indent 0

Reads the blob from FILE (or stdin), prints the parsed envelope as JSON.

Exit codes:
    0  parsed
    1  the trace is unparseable or FILE cannot be read
    2  bad arguments
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from .config import configure
from .diagnostics import UNAVAILABLE, parse_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackmodel",
        description="Parse a host error blob into structured frames.",
    )
    parser.add_argument("file", nargs="?", help="file holding the blob (default: stdin)")
    parser.add_argument("--settings", help="path to stackmodel.settings.yaml")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = configure(settings_path=args.settings)

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as fh:
                text = fh.read()
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
    else:
        text = sys.stdin.read()

    envelope = parse_error(text, max_eval_depth=config.parser.max_eval_depth)
    if envelope is UNAVAILABLE:
        print("Error: stack trace could not be parsed", file=sys.stderr)
        return 1

    print(json.dumps(envelope.to_dict(), indent=args.indent or None))
    return 0
