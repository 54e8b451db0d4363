"""Document-state object handed to the suggestion engine."""

from workspace_resolver.cursor_offset import CursorOffset, LineSource
from workspace_resolver.fs_resolver import FSResolver


class EditorStateProvider:
    """Describes the document being edited: its text, path and cursor offset."""

    def __init__(self, fs_resolver: FSResolver, path: str, editor: LineSource) -> None:
        """Capture the cursor offset of ``editor`` for the document at ``path``."""
        self.fs_resolver = fs_resolver
        self.path = path
        self.offset = CursorOffset.from_editor(editor).get_offset()

    def get_text(self) -> str:
        return self.fs_resolver.content(self.path)

    def get_path(self) -> str:
        return self.path

    def get_base_name(self) -> str:
        element = self.fs_resolver.get_element(self.path)
        return element.name if element is not None else ""

    def get_offset(self) -> int:
        return self.offset
