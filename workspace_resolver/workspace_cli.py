"""Command-line access to a directory through the workspace resolver.

The directory is scanned into an in-memory workspace tree and every command
goes through :class:`~workspace_resolver.fs_resolver.FSResolver`, so the
output is what a suggestion engine would see.
"""

import argparse
import logging
from pathlib import Path

from workspace_resolver.load_config import load_config
from workspace_resolver.run_command import run_command


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the workspace CLI."""
    ap = argparse.ArgumentParser(
        description="Query a directory through the path-addressed workspace resolver.",
    )
    ap.add_argument(
        "root",
        type=Path,
        help="Directory to expose as the workspace root",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("ls", help="List the children of a directory")
    ls.add_argument("path", nargs="?", default="/")

    cat = sub.add_parser("cat", help="Print the contents of a file")
    cat.add_argument("path")
    cat.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="Load the file through the asynchronous loader",
    )

    stat = sub.add_parser("stat", help="Show metadata for a path")
    stat.add_argument("path")

    resolve = sub.add_parser("resolve", help="Resolve a path against a context path")
    resolve.add_argument("context")
    resolve.add_argument("relative")

    offset = sub.add_parser("offset", help="Convert a line/column cursor to an offset")
    offset.add_argument("path")
    offset.add_argument("line", type=int, help="Zero-based line index")
    offset.add_argument("column", type=int, help="Zero-based column index")
    return ap


def main() -> int:
    """Run the workspace CLI."""
    args = build_parser().parse_args()
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return run_command(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
