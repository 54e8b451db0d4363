"""Exceptions raised by the workspace resolver."""


class WorkspaceResolverError(Exception):
    """Base class for resolver errors."""


class PathNotFoundError(WorkspaceResolverError):
    """Raised when an operation requires an existing node and none is found."""

    def __init__(self, path: str) -> None:
        """Initialize the error with the path that failed to resolve."""
        super().__init__(f"No workspace entry at path: {path!r}")
        self.path = path


class DuplicateChildError(WorkspaceResolverError):
    """Raised when a directory would hold two children with the same name."""

    def __init__(self, directory: str, name: str) -> None:
        """Initialize the error with the directory path and clashing name."""
        super().__init__(f"Duplicate entry {name!r} in directory {directory!r}")
        self.directory = directory
        self.name = name
