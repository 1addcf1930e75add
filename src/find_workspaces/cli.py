"""Command line entrypoint.

Usage:
  find-workspaces [ROOT] [--verbose]

Prints the resolved workspace directories as a JSON array.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .core import find_workspaces
from .parsers import ManifestError


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="find-workspaces",
        description="List the workspace directories declared by a monorepo root.",
    )
    parser.add_argument("root", nargs="?", type=Path, default=None)
    parser.add_argument("--verbose", action="store_true", help="log debug output to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        workspaces = find_workspaces(args.root)
    except ManifestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(workspaces, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
