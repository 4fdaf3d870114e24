"""Service executing search notes and ad-hoc queries."""

import logging

from notesearch.actions.parser import ActionParser
from notesearch.actions.registry import ActionRegistry
from notesearch.domain.note import Note
from notesearch.domain.search import SearchContext
from notesearch.exceptions import NoteNotFoundError, NotASearchNoteError
from notesearch.note_store.base import NoteStore
from notesearch.query_engine.base import QueryEngine
from notesearch.search.resolver import SearchResolver

logger = logging.getLogger(__name__)


class SearchNoteService:
    """Resolves search notes and applies their actions to every matching note."""

    def __init__(
        self,
        *,
        note_store: NoteStore,
        query_engine: QueryEngine,
        resolver: SearchResolver,
        registry: ActionRegistry,
    ):
        """Initialize the service with its collaborators.

        Args:
            note_store: Store used to load search notes and the notes they match
            query_engine: Engine evaluating ad-hoc queries
            resolver: Resolver turning a search note into candidate note IDs
            registry: Action handlers, shared by every execution
        """
        self.note_store = note_store
        self.query_engine = query_engine
        self.resolver = resolver
        self.registry = registry
        self.action_parser = ActionParser()

    def get_search_note(self, note_id: str) -> Note | None:
        """Load a search note.

        Args:
            note_id: ID of the search note

        Returns:
            The search note, or None if it is soft-deleted. Executions are triggered
            from change feeds as well, for which a deleted note is harmless.

        Raises:
            NoteNotFoundError: If no note has the given ID
            NotASearchNoteError: If the note is not a search note
        """
        note = self.note_store.get_note(note_id)

        if note is None:
            raise NoteNotFoundError(note_id)

        if note.is_deleted:
            return None

        if not note.is_search:
            raise NotASearchNoteError(note_id)

        return note

    async def search_from_note(self, note_id: str) -> list[str]:
        """Get the IDs of the notes a search note matches."""
        note = self.get_search_note(note_id)
        if note is None:
            return []

        return await self.resolver.resolve(note)

    async def search_and_execute(self, note_id: str) -> None:
        """Apply the actions of a search note to every note it matches.

        Each action runs on its own: a failing action is logged and the remaining
        actions and notes are still processed. Changes made before a failure stay.
        """
        note = self.get_search_note(note_id)
        if note is None:
            return

        result_note_ids = await self.resolver.resolve(note)
        actions = self.action_parser.parse(note)

        logger.info(
            f"Executing {len(actions)} search actions of {note_id} on {len(result_note_ids)} notes"
        )

        for result_note_id in result_note_ids:
            result_note = self.note_store.get_note(result_note_id)

            if result_note is None or result_note.is_deleted:
                continue

            for action in actions:
                try:
                    logger.info(
                        f"Applying action handler to note {result_note.id}: "
                        f"{action.model_dump_json(by_alias=True)}"
                    )
                    await self.registry.apply(action, result_note)
                except Exception as e:
                    logger.error(
                        f"Search action {action.name} failed on note {result_note.id} with {e}"
                    )

    def search(self, search_string: str) -> list[str]:
        """Full search over all notes, archived ones included."""
        search_context = SearchContext(
            fast_search=False,
            include_archived_notes=True,
            fuzzy_attribute_search=False,
        )
        return self._find_note_ids(search_string, search_context)

    def quick_search(self, search_string: str) -> list[str]:
        search_context = SearchContext(
            fast_search=False,
            include_archived_notes=False,
            fuzzy_attribute_search=False,
        )
        return self._find_note_ids(search_string, search_context)

    def _find_note_ids(self, search_string: str, search_context: SearchContext) -> list[str]:
        return [
            result.note_id
            for result in self.query_engine.find_notes_with_query(search_string, search_context)
        ]
