"""Path-addressed, read-only filesystem view over an in-memory workspace tree."""

from __future__ import annotations

import logging

from workspace_resolver.document_loader import DocumentLoader
from workspace_resolver.errors import PathNotFoundError
from workspace_resolver.parse_path import PATH_SEPARATOR, parse_path
from workspace_resolver.workspace_node import WorkspaceNode

logger = logging.getLogger(__name__)


class FSResolver:
    """Resolves workspace paths to nodes and serves their contents and metadata.

    A resolver is bound to one root directory and one document loader for its
    whole lifetime and keeps no other state, so a fresh instance can be built
    for every suggestion request. Every query has an ``*_async`` twin; the
    tree walk itself never suspends, only the loader call does.
    """

    def __init__(self, home_directory: WorkspaceNode, repository: DocumentLoader) -> None:
        """Bind the resolver to a root directory and a document loader."""
        self.home_directory = home_directory
        self.repository = repository

    # -----------------------------
    # Lookup
    # -----------------------------

    def get_element(self, path: str) -> WorkspaceNode | None:
        """Return the node at ``path``, or ``None`` when nothing is there."""
        path_members = parse_path(path)
        element = self._get_element_from_path(path_members, 0, self.home_directory)
        if element is None:
            logger.debug("Path not found in workspace: %s", path)
        return element

    def _get_element_from_path(
        self, path_members: list[str], index: int, element: WorkspaceNode
    ) -> WorkspaceNode | None:
        while index < len(path_members):
            # Only directories have children
            if not element.is_directory:
                return None
            child = self.get_child(element, path_members[index])
            if child is None:
                return None
            element = child
            index += 1
        return element

    def get_child(self, directory: WorkspaceNode, child_name: str) -> WorkspaceNode | None:
        """Return the direct child of ``directory`` named ``child_name``."""
        for child in directory.children:
            if child.name == child_name:
                return child
        return None

    # -----------------------------
    # Contents
    # -----------------------------

    def get_file_content(self, file: WorkspaceNode) -> str:
        """Return the text of a file node, loading it if it is not open."""
        if file.loaded and file.doc is not None:
            return file.doc.get_value()
        return self.repository.load_file_sync(file).contents

    async def get_file_content_async(self, file: WorkspaceNode) -> str:
        """Asynchronous form of :meth:`get_file_content`."""
        if file.loaded and file.doc is not None:
            return file.doc.get_value()
        loaded = await self.repository.load_file(file)
        return loaded.contents

    def content(self, path: str) -> str:
        """Return the text at ``path``; empty for directories and missing paths."""
        element = self.get_element(path)
        if element is None or element.is_directory:
            return ""
        return self.get_file_content(element)

    async def content_async(self, path: str) -> str:
        """Asynchronous form of :meth:`content`."""
        element = self.get_element(path)
        if element is None or element.is_directory:
            return ""
        return await self.get_file_content_async(element)

    # -----------------------------
    # Listing and metadata
    # -----------------------------

    def list(self, path: str) -> list[str]:
        """Return the names of the direct children of the directory at ``path``."""
        element = self.get_element(path)
        if element is None or not element.is_directory:
            return []
        return [child.name for child in element.children]

    async def list_async(self, path: str) -> list[str]:
        """Asynchronous form of :meth:`list`."""
        return self.list(path)

    def exists(self, path: str) -> bool:
        """Return whether ``path`` resolves to a node."""
        return self.get_element(path) is not None

    async def exists_async(self, path: str) -> bool:
        """Asynchronous form of :meth:`exists`."""
        return self.exists(path)

    def is_directory(self, path: str) -> bool:
        """Return whether ``path`` resolves to a directory."""
        element = self.get_element(path)
        return element is not None and element.is_directory

    async def is_directory_async(self, path: str) -> bool:
        """Asynchronous form of :meth:`is_directory`."""
        return self.is_directory(path)

    def dirname(self, path: str) -> str:
        """Return the directory of ``path``.

        A directory yields its own canonical node path. A file yields the
        input string truncated at its last separator, which is not guaranteed
        to match the node's canonical path. Missing paths yield ``""``.
        """
        element = self.get_element(path)
        if element is None:
            return ""
        if element.is_directory:
            return element.path
        separator_index = path.rfind(PATH_SEPARATOR)
        if separator_index < 0:
            return ""
        return path[:separator_index]

    async def dirname_async(self, path: str) -> str:
        """Asynchronous form of :meth:`dirname`."""
        return self.dirname(path)

    def resolve(self, context_path: str, relative_path: str) -> str:
        """Join ``relative_path`` onto ``context_path`` unless it is absolute."""
        if relative_path.startswith(PATH_SEPARATOR):
            return relative_path
        if context_path.endswith(PATH_SEPARATOR):
            return context_path + relative_path
        return context_path + PATH_SEPARATOR + relative_path

    async def resolve_async(self, context_path: str, relative_path: str) -> str:
        """Asynchronous form of :meth:`resolve`."""
        return self.resolve(context_path, relative_path)

    def extname(self, path: str) -> str:
        """Return the extension of the file at ``path`` without the dot.

        Raises:
            PathNotFoundError: if ``path`` does not resolve to a node.
        """
        element = self.get_element(path)
        if element is None:
            raise PathNotFoundError(path)
        if element.is_directory:
            return ""

        name_parts = element.name.split(".")
        if len(name_parts) <= 1:
            return ""
        return name_parts[-1]

    async def extname_async(self, path: str) -> str:
        """Asynchronous form of :meth:`extname`."""
        return self.extname(path)
