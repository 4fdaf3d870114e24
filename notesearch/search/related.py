from notesearch.domain.note import Attribute
from notesearch.domain.search import RelatedNotes, SearchContext, SearchResult
from notesearch.query_engine.base import QueryEngine
from notesearch.search.formatter import format_attribute_for_search

RELATED_NOTES_LIMIT = 20


class RelatedNotesRanker:
    """Suggests notes carrying the same attribute, value matches ranked first."""

    def __init__(self, query_engine: QueryEngine, limit: int = RELATED_NOTES_LIMIT) -> None:
        self.query_engine = query_engine
        self.limit = limit

    def related(self, attribute: Attribute) -> RelatedNotes:
        search_context = SearchContext(
            fast_search=True,
            include_archived_notes=False,
            fuzzy_attribute_search=False,
        )

        matching_name_and_value = self.query_engine.find_notes_with_query(
            format_attribute_for_search(attribute, True), search_context
        )
        matching_name = self.query_engine.find_notes_with_query(
            format_attribute_for_search(attribute, False), search_context
        )

        all_results = list(matching_name_and_value) + list(matching_name)

        results: list[SearchResult] = []
        seen_note_ids: set[str] = set()
        for record in all_results:
            if len(results) >= self.limit:
                break

            if record.note_id in seen_note_ids:
                continue

            seen_note_ids.add(record.note_id)
            results.append(record)

        return RelatedNotes(count=len(all_results), results=results)
