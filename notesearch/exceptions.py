"""Domain errors raised by the search services."""


class NoteSearchError(Exception):
    """Base class for errors surfaced to callers of the search services."""


class NoteNotFoundError(NoteSearchError):
    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__(f"Note {note_id} has not been found.")


class NotASearchNoteError(NoteSearchError):
    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__(f"Note {note_id} is not a search note.")


class ScriptingDisabledError(NoteSearchError):
    """Raised when a script is submitted to a runner that does not execute scripts."""
