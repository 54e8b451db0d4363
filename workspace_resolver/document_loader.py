"""Interfaces and an in-memory implementation for loading file contents."""

import logging
from dataclasses import dataclass
from typing import Protocol

from workspace_resolver.workspace_node import WorkspaceNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedFile:
    """Result of loading a file through a document loader."""

    contents: str


class DocumentLoader(Protocol):
    """Loads the contents of workspace files that are not open in the editor."""

    def load_file_sync(self, file: WorkspaceNode) -> LoadedFile:
        """Load a file, blocking until its contents are available."""
        ...

    async def load_file(self, file: WorkspaceNode) -> LoadedFile:
        """Load a file asynchronously."""
        ...


class InMemoryLoader:
    """Loader serving the ``contents`` already stored on each node."""

    def load_file_sync(self, file: WorkspaceNode) -> LoadedFile:
        """Return the stored contents of ``file``."""
        logger.debug("Loading %s from memory", file.path)
        return LoadedFile(file.contents or "")

    async def load_file(self, file: WorkspaceNode) -> LoadedFile:
        """Return the stored contents of ``file``."""
        logger.debug("Loading %s from memory (async)", file.path)
        return LoadedFile(file.contents or "")
