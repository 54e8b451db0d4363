"""Turning engine suggestions into an editor completion hint."""

import re
from dataclasses import dataclass, field
from typing import Any

from workspace_resolver.cursor_offset import CursorPosition, LineSource
from workspace_resolver.document_loader import DocumentLoader
from workspace_resolver.suggest import get_suggestions
from workspace_resolver.suggestion_engine import Suggestion, SuggestionEngine
from workspace_resolver.workspace_node import WorkspaceNode

DEFAULT_WORD_PATTERN = r":?(:|\s|\[|]|-)+"


@dataclass(frozen=True)
class HintItem:
    """One row of the completion popup."""

    text: str
    display_text: str


@dataclass
class Hint:
    """Completion hint: the word being replaced and the candidate rows."""

    word: str
    from_pos: CursorPosition
    to_pos: CursorPosition
    items: list[HintItem] = field(default_factory=list)


def current_word(line: str, word_pattern: str = DEFAULT_WORD_PATTERN) -> str:
    """Return the word being typed at the end of ``line``."""
    if not line:
        return ""
    # re.split also returns captured delimiters, the word is always last
    return re.split(word_pattern, line)[-1]


def is_word_part_of_the_suggestion(
    word: str, suggestion: Suggestion, *, exclude_exact: bool = True
) -> bool:
    """Return whether ``suggestion`` completes ``word``."""
    if not word:
        return True
    if exclude_exact and suggestion.text == word:
        return False
    return suggestion.text.startswith(word)


def build_hint(
    editor: LineSource,
    suggestions: list[Suggestion],
    config: dict[str, Any] | None = None,
) -> Hint:
    """Build the completion hint for the editor's current cursor."""
    hint_config = (config or {}).get("hint", {})
    word_pattern = hint_config.get("word_pattern", DEFAULT_WORD_PATTERN)
    exclude_exact = hint_config.get("exclude_exact_match", True)

    cursor = editor.get_cursor()
    line = editor.get_line(cursor.line)
    word = current_word(line, word_pattern)
    to_ch = cursor.ch
    from_ch = to_ch - len(word)

    items = [
        HintItem(text=s.text, display_text=s.display_text or s.text)
        for s in suggestions
        if is_word_part_of_the_suggestion(word, s, exclude_exact=exclude_exact)
    ]

    return Hint(
        word=word,
        items=items,
        from_pos=CursorPosition(cursor.line, from_ch),
        to_pos=CursorPosition(cursor.line, to_ch),
    )


async def autocomplete(
    editor: LineSource,
    home_directory: WorkspaceNode,
    current_file_path: str,
    *,
    engine: SuggestionEngine,
    repository: DocumentLoader,
    config: dict[str, Any] | None = None,
) -> Hint:
    """Fetch suggestions for the editor and shape them into a hint."""
    suggestions = await get_suggestions(
        home_directory,
        current_file_path,
        editor,
        engine=engine,
        repository=repository,
    )
    return build_hint(editor, suggestions, config)
