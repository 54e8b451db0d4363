"""Workspace tree and document loader backed by a directory on disk."""

import asyncio
import logging
from pathlib import Path
from typing import Any

from workspace_resolver.document_loader import LoadedFile
from workspace_resolver.parse_path import PATH_SEPARATOR
from workspace_resolver.workspace_node import WorkspaceNode, join_child_path

logger = logging.getLogger(__name__)


class DiskLoader:
    """Loads workspace files from the directory the tree was scanned from."""

    def __init__(self, root_dir: Path, encoding: str = "utf-8") -> None:
        """Initialize the loader for files under ``root_dir``."""
        self.root_dir = root_dir
        self.encoding = encoding

    def file_path(self, file: WorkspaceNode) -> Path:
        """Map a workspace node to its location on disk."""
        return self.root_dir / file.path.lstrip(PATH_SEPARATOR)

    def load_file_sync(self, file: WorkspaceNode) -> LoadedFile:
        """Read ``file`` from disk. ``OSError`` propagates to the caller."""
        p = self.file_path(file)
        logger.debug("Reading %s", p)
        return LoadedFile(p.read_text(encoding=self.encoding))

    async def load_file(self, file: WorkspaceNode) -> LoadedFile:
        """Read ``file`` from disk in a worker thread."""
        return await asyncio.to_thread(self.load_file_sync, file)


def scan_directory(root_dir: Path, config: dict[str, Any] | None = None) -> WorkspaceNode:
    """Build a workspace tree mirroring ``root_dir``.

    File contents are not read; nodes are left unloaded so the resolver goes
    through a :class:`DiskLoader` for them.
    Symlinked directories are skipped so the tree stays acyclic.
    """
    workspace_config = (config or {}).get("workspace", {})
    include_hidden = workspace_config.get("include_hidden", False)
    hidden_names = set((config or {}).get("hidden_names", []))

    root = WorkspaceNode(name=root_dir.name, is_directory=True, path=PATH_SEPARATOR)
    _scan_into(root, root_dir, include_hidden=include_hidden, hidden_names=hidden_names)
    return root


def _scan_into(
    node: WorkspaceNode,
    directory: Path,
    *,
    include_hidden: bool,
    hidden_names: set[str],
) -> None:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.name in hidden_names:
            continue
        if not include_hidden and entry.name.startswith("."):
            continue
        # Symlinked directories could point back at an ancestor
        if entry.is_symlink() and entry.is_dir():
            logger.debug("Skipping symlinked directory %s", entry)
            continue
        child = WorkspaceNode(
            name=entry.name,
            is_directory=entry.is_dir(),
            path=join_child_path(node.path, entry.name),
        )
        if child.is_directory:
            _scan_into(child, entry, include_hidden=include_hidden, hidden_names=hidden_names)
        node.children.append(child)
