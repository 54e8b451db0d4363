"""Execution of the workspace CLI commands against a scanned directory."""

import argparse
import asyncio
import logging
from typing import Any

from workspace_resolver.cursor_offset import CursorOffset, CursorPosition, TextBuffer
from workspace_resolver.disk_workspace import DiskLoader, scan_directory
from workspace_resolver.fs_resolver import FSResolver

logger = logging.getLogger(__name__)


def run_command(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Run the selected command and print its result."""
    root_dir = args.root.resolve()
    if not root_dir.is_dir():
        msg = f"Workspace root is not a directory: {args.root}"
        raise SystemExit(msg)

    home = scan_directory(root_dir, config)
    loader = DiskLoader(root_dir, config["workspace"]["encoding"])
    resolver = FSResolver(home, loader)
    logger.info("Scanned workspace %s", root_dir)

    if args.command == "ls":
        for name in resolver.list(args.path):
            print(name)
    elif args.command == "cat":
        print(_read(resolver, args.path, use_async=args.use_async), end="")
    elif args.command == "stat":
        _print_stat(resolver, args.path)
    elif args.command == "resolve":
        print(resolver.resolve(args.context, args.relative))
    elif args.command == "offset":
        print(_offset(resolver, args.path, args.line, args.column))
    else:
        msg = f"Unknown command: {args.command}"
        raise SystemExit(msg)
    return 0


def _read(resolver: FSResolver, path: str, *, use_async: bool) -> str:
    if use_async:
        return asyncio.run(resolver.content_async(path))
    return resolver.content(path)


def _print_stat(resolver: FSResolver, path: str) -> None:
    exists = resolver.exists(path)
    print(f"path: {path}")
    print(f"exists: {str(exists).lower()}")
    if not exists:
        return
    print(f"is_directory: {str(resolver.is_directory(path)).lower()}")
    print(f"dirname: {resolver.dirname(path)}")
    print(f"extname: {resolver.extname(path)}")


def _offset(resolver: FSResolver, path: str, line: int, column: int) -> int:
    buffer = TextBuffer(resolver.content(path), CursorPosition(line, column))
    return CursorOffset.from_editor(buffer).get_offset()
