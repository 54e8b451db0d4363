"""Adapter connecting the editor, the workspace resolver and the suggestion engine."""

import logging

from workspace_resolver.cursor_offset import LineSource
from workspace_resolver.document_loader import DocumentLoader
from workspace_resolver.editor_state import EditorStateProvider
from workspace_resolver.fs_resolver import FSResolver
from workspace_resolver.suggestion_engine import Suggestion, SuggestionEngine
from workspace_resolver.workspace_node import WorkspaceNode

logger = logging.getLogger(__name__)


async def get_suggestions(
    home_directory: WorkspaceNode,
    current_file_path: str,
    editor: LineSource,
    *,
    engine: SuggestionEngine,
    repository: DocumentLoader,
) -> list[Suggestion]:
    """Ask the suggestion engine for completions at the editor's cursor.

    Engine failures and non-list results are reported as no suggestions.
    """
    fs_resolver = FSResolver(home_directory, repository)
    editor_state = EditorStateProvider(fs_resolver, current_file_path, editor)
    try:
        content_provider = engine.get_content_provider(fs_resolver)
        result = await engine.suggest_async(editor_state, content_provider)
        if not isinstance(result, list):
            logger.debug("Ignoring non-list suggestion result: %s", type(result).__name__)
            return []
        return [Suggestion.from_record(record) for record in result]
    except Exception:
        logger.exception("Suggestion engine failed for %s", current_file_path)
        return []
