"""Capability interface of the external content-suggestion engine."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from workspace_resolver.fs_resolver import FSResolver


@dataclass(frozen=True)
class Suggestion:
    """A single completion proposed by the suggestion engine."""

    text: str
    display_text: str | None = None

    @classmethod
    def from_record(cls, record: Any) -> "Suggestion":
        """Convert an engine record (mapping or object) into a suggestion."""
        if isinstance(record, cls):
            return record
        if isinstance(record, Mapping):
            display = record.get("displayText", record.get("display_text"))
            return cls(str(record["text"]), display)
        display = getattr(record, "display_text", None) or getattr(record, "displayText", None)
        return cls(str(record.text), display)


class DocumentState(Protocol):
    """What the engine may ask about the document being edited."""

    def get_text(self) -> str: ...

    def get_path(self) -> str: ...

    def get_base_name(self) -> str: ...

    def get_offset(self) -> int: ...


class SuggestionEngine(Protocol):
    """Engine that proposes completions from a document state and a resolver."""

    def get_content_provider(self, fs_resolver: FSResolver) -> Any:
        """Wrap a resolver in whatever content provider the engine consumes."""
        ...

    async def suggest_async(self, editor_state: DocumentState, content_provider: Any) -> Any:
        """Return a list of suggestion records for the document state."""
        ...
