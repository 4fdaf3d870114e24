import json
import logging
from pathlib import Path
from typing import Dict, List

from notesearch.domain.note import Attribute, Note, Revision
from notesearch.note_store.base import NoteStore

logger = logging.getLogger(__name__)


class LocalNoteStore(NoteStore):
    """Local note store that keeps notes and revisions in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalNoteStore.

        Args:
            filepath: Path to note store file. If provided and exists, will auto-load.
                     If provided, every saved note is written back to this path.
                     If not provided, creates empty store in memory only.
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r") as f:
                data = json.load(f)
            self._notes = {
                note_id: Note(**note_data) for note_id, note_data in data["notes"].items()
            }
            self._revisions = {
                revision_id: Revision(**revision_data)
                for revision_id, revision_data in data.get("revisions", {}).items()
            }
        else:
            self._notes = {}
            self._revisions = {}

    @classmethod
    def from_data(
        cls,
        notes: Dict[str, Note] | None = None,
        revisions: Dict[str, Revision] | None = None,
    ) -> "LocalNoteStore":
        """Create LocalNoteStore from provided data (useful for testing).

        Args:
            notes: Notes dictionary
            revisions: Revisions dictionary

        Returns:
            LocalNoteStore instance with provided data
        """
        instance = cls(filepath=None)
        instance._notes = notes or {}
        instance._revisions = revisions or {}
        return instance

    def get_note(self, note_id: str) -> Note | None:
        """Get a note by its ID, with inherited attributes resolved."""
        note = self._notes.get(note_id)
        if note is not None:
            note.inherited_attributes = self._get_inherited_attributes(note)
        return note

    def get_all_notes(self) -> List[Note]:
        """Get every note, including soft-deleted ones."""
        return [self.get_note(note_id) for note_id in self._notes]  # type: ignore[misc]

    def save_note(self, note: Note) -> None:
        """Add a new note or update an existing one and write the store to disk."""
        self._notes[note.id] = note
        if self._filepath:
            self.save()

    def get_revisions(self, note_id: str) -> List[Revision]:
        """Get all revisions recorded for a note, oldest first."""
        revisions = [rev for rev in self._revisions.values() if rev.note_id == note_id]
        return sorted(revisions, key=lambda rev: rev.date_created)

    def add_revision(self, revision: Revision) -> None:
        """Record a revision."""
        self._revisions[revision.id] = revision

    def erase_note_revisions(self, revision_ids: List[str]) -> None:
        """Permanently remove the given revisions."""
        if not revision_ids:
            return

        for revision_id in revision_ids:
            self._revisions.pop(revision_id, None)

        logger.info(f"Erased {len(revision_ids)} note revisions")
        if self._filepath:
            self.save()

    def save(self, filepath: str | None = None) -> None:
        """Save the note store to a JSON file.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        save_path = str(save_path)
        data = {
            "notes": {note_id: note.model_dump() for note_id, note in self._notes.items()},
            "revisions": {
                revision_id: revision.model_dump()
                for revision_id, revision in self._revisions.items()
            },
        }
        with open(save_path, "w") as f:
            json.dump(data, f)

    def _get_inherited_attributes(self, note: Note) -> List[Attribute]:
        """Collect inheritable attributes from all ancestors, closest ancestor first."""
        inherited = []
        visited = {note.id}
        queue = list(note.parent_ids)

        while queue:
            parent_id = queue.pop(0)
            if parent_id in visited:
                continue
            visited.add(parent_id)

            parent = self._notes.get(parent_id)
            if parent is None or parent.is_deleted:
                continue

            inherited.extend(
                attr for attr in parent.attributes if attr.is_inheritable and not attr.is_deleted
            )
            queue.extend(parent.parent_ids)

        return inherited
