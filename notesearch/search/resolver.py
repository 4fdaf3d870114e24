"""Resolution of a search note into the IDs of the notes it matches."""

import logging
from collections.abc import Mapping
from typing import Any

from notesearch.domain.note import Note
from notesearch.domain.search import SearchContext
from notesearch.note_store.base import NoteStore
from notesearch.query_engine.base import QueryEngine
from notesearch.scripting.base import ScriptRunner

logger = logging.getLogger(__name__)

SEARCH_SCRIPT_RELATION = "searchScript"


class SearchResolver:
    """Turns a search note into an ordered, deduplicated list of candidate note IDs.

    The note either carries a `searchString` label evaluated by the query engine, or
    a `searchScript` relation pointing at a backend script note whose return value
    lists the matches.
    """

    def __init__(
        self,
        *,
        note_store: NoteStore,
        query_engine: QueryEngine,
        script_runner: ScriptRunner,
        root_note_id: str = "root",
    ) -> None:
        self.note_store = note_store
        self.query_engine = query_engine
        self.script_runner = script_runner
        self.root_note_id = root_note_id

    async def resolve(self, search_note: Note) -> list[str]:
        if search_note.get_relation_value(SEARCH_SCRIPT_RELATION):
            note_ids = await self._search_from_relation(search_note, SEARCH_SCRIPT_RELATION)
        else:
            search_context = self.build_search_context(search_note)
            search_string = search_note.get_label_value("searchString") or ""
            note_ids = [
                result.note_id
                for result in self.query_engine.find_notes_with_query(
                    search_string, search_context
                )
            ]

        # a search must never target itself or the root, a destructive action would
        # then reach the whole tree
        excluded = {self.root_note_id, search_note.id}
        return [note_id for note_id in dict.fromkeys(note_ids) if note_id not in excluded]

    @staticmethod
    def build_search_context(search_note: Note) -> SearchContext:
        return SearchContext(
            fast_search=search_note.has_label("fastSearch"),
            ancestor_note_id=search_note.get_relation_value("ancestor"),
            ancestor_depth=search_note.get_label_value("ancestorDepth"),
            include_archived_notes=search_note.has_label("includeArchivedNotes"),
            order_by=search_note.get_label_value("orderBy"),
            order_direction=search_note.get_label_value("orderDirection"),
            limit=search_note.get_label_value("limit"),
            debug=search_note.has_label("debug"),
            fuzzy_attribute_search=False,
        )

    async def _search_from_relation(self, search_note: Note, relation_name: str) -> list[str]:
        script_note_id = search_note.get_relation_value(relation_name)
        script_note = self.note_store.get_note(script_note_id) if script_note_id else None

        if script_note is None or script_note.is_deleted:
            logger.info(f"Search note's relation {relation_name} has not been found.")
            return []

        if not script_note.is_backend_script:
            logger.info(f"Note {script_note.id} is not executable.")
            return []

        if not search_note.is_content_available:
            logger.info(f"Note {script_note.id} is not available outside of protected session.")
            return []

        result = await self.script_runner.execute_note(script_note, origin_entity=search_note)

        if not isinstance(result, list):
            logger.info(f"Result from {script_note.id} is not a list.")
            return []

        if not result:
            return []

        # either a list of note IDs, or of note-like items we extract the IDs from
        if isinstance(result[0], str):
            if not all(isinstance(item, str) for item in result):
                logger.info(f"Result from {script_note.id} mixes note IDs with other values.")
                return []
            return result

        note_ids = []
        for item in result:
            note_id = _extract_note_id(item)
            if note_id is None:
                logger.info(f"Result from {script_note.id} contains an item without a note ID.")
                return []
            note_ids.append(note_id)
        return note_ids


def _extract_note_id(item: Any) -> str | None:
    if isinstance(item, Note):
        return item.id
    if isinstance(item, Mapping):
        note_id = item.get("noteId", item.get("note_id"))
    else:
        note_id = getattr(item, "note_id", None)
    return note_id if isinstance(note_id, str) else None
