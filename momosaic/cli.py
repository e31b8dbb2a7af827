"""Command line entry point reporting the chosen target and source pictures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

APPLICATION_NAME = "mosaic_cmd"
APPLICATION_VERSION = "0.0.1"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser of the command."""
    parser = argparse.ArgumentParser(prog=APPLICATION_NAME, description="MoMosaic")
    parser.add_argument(
        "-v", "--version", action="version", version=APPLICATION_VERSION
    )
    parser.add_argument(
        "-t",
        dest="target",
        metavar="targetFileName",
        default="",
        help="The target picture.",
    )
    parser.add_argument("sources", nargs="*", help="The mosaic tile pictures.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    print(f"Using target image: {args.target}", file=sys.stderr)
    print(f"Using source files: {args.sources}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())