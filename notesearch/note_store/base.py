from typing import List, Protocol

from notesearch.domain.note import Note, Revision


class NoteStore(Protocol):
    """Protocol for note storage implementations."""

    def get_note(self, note_id: str) -> Note | None:
        """Get a note by its ID."""
        ...

    def get_all_notes(self) -> List[Note]:
        """Get every note, including soft-deleted ones."""
        ...

    def save_note(self, note: Note) -> None:
        """Persist the mutated fields of a note."""
        ...

    def get_revisions(self, note_id: str) -> List[Revision]:
        """Get all revisions recorded for a note."""
        ...

    def erase_note_revisions(self, revision_ids: List[str]) -> None:
        """Permanently remove the given revisions."""
        ...
