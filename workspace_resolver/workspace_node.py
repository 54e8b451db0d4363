"""Data models for entries of the in-memory workspace tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from workspace_resolver.errors import DuplicateChildError
from workspace_resolver.parse_path import PATH_SEPARATOR


class LiveDocument(Protocol):
    """An editor buffer whose current text can be read."""

    def get_value(self) -> str:
        """Return the current text of the buffer."""
        ...


class TextDocument:
    """Live document backed by a plain string."""

    def __init__(self, text: str = "") -> None:
        """Initialize the document with its text."""
        self.text = text

    def get_value(self) -> str:
        """Return the document text."""
        return self.text

    def set_value(self, text: str) -> None:
        """Replace the document text."""
        self.text = text


@dataclass
class WorkspaceNode:
    """A file or directory held by the editor's document model."""

    name: str
    is_directory: bool = False
    children: list[WorkspaceNode] = field(default_factory=list)
    path: str = PATH_SEPARATOR  # canonical path of this node, e.g. /a/b.txt
    loaded: bool = False
    doc: LiveDocument | None = None  # open editor buffer, if any
    contents: str | None = None  # text as last read from storage


def join_child_path(parent_path: str, name: str) -> str:
    """Return the canonical path of a child named ``name`` under ``parent_path``."""
    if parent_path.endswith(PATH_SEPARATOR):
        return f"{parent_path}{name}"
    return f"{parent_path}{PATH_SEPARATOR}{name}"


def build_tree(spec: dict[str, Any], parent_path: str | None = None) -> WorkspaceNode:
    """Build a workspace tree from a nested mapping.

    Accepts both ``isDirectory`` and ``is_directory`` keys. A file entry with
    ``loaded: true`` gets a live document holding its ``contents``.
    """
    name = spec.get("name", "")
    is_directory = bool(spec.get("is_directory", spec.get("isDirectory", False)))
    # The root is addressed as "/" whatever its display name is
    path = PATH_SEPARATOR if parent_path is None else join_child_path(parent_path, name)

    node = WorkspaceNode(name=name, is_directory=is_directory, path=path)

    if is_directory:
        seen: set[str] = set()
        for child_spec in spec.get("children", []):
            child = build_tree(child_spec, path)
            if child.name in seen:
                raise DuplicateChildError(path, child.name)
            seen.add(child.name)
            node.children.append(child)
        return node

    node.contents = spec.get("contents")
    if spec.get("loaded", False):
        node.loaded = True
        node.doc = TextDocument(node.contents or "")
    return node
