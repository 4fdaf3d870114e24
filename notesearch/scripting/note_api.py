"""The object action scripts receive as `note`."""

from notesearch.domain.note import Note


class NoteScriptApi:
    """Exposes the mutation primitives of a single note and nothing else.

    Scripts never get the store, other notes, or the underlying model, so the
    sandbox only has to guard this surface.
    """

    __slots__ = ("_note",)

    def __init__(self, note: Note) -> None:
        self._note = note

    @property
    def note_id(self) -> str:
        return self._note.id

    @property
    def title(self) -> str:
        return self._note.title

    @title.setter
    def title(self, value: str) -> None:
        self._note.title = value

    @property
    def content(self) -> str:
        return self._note.content

    @content.setter
    def content(self, value: str) -> None:
        self._note.content = value

    def get_label_value(self, name: str) -> str | None:
        return self._note.get_label_value(name)

    def has_label(self, name: str) -> bool:
        return self._note.has_label(name)

    def set_label(self, name: str, value: str = "") -> None:
        self._note.set_label(name, value)

    def remove_label(self, name: str) -> None:
        for label in self._note.get_owned_labels(name):
            label.is_deleted = True

    def get_relation_value(self, name: str) -> str | None:
        return self._note.get_relation_value(name)

    def set_relation(self, name: str, target_note_id: str) -> None:
        self._note.set_relation(name, target_note_id)

    def remove_relation(self, name: str) -> None:
        for relation in self._note.get_owned_relations(name):
            relation.is_deleted = True
