from typing import Dict, List

from notesearch.domain.search import SearchContext, SearchResult
from notesearch.query_engine.base import QueryEngine


class FakeQueryEngine(QueryEngine):
    """Fake query engine returning predefined results per query string."""

    def __init__(self, results: Dict[str, List[str]] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[str, SearchContext]] = []

    def find_notes_with_query(
        self, query: str, search_context: SearchContext
    ) -> List[SearchResult]:
        self.calls.append((query, search_context))
        return [SearchResult(note_id=note_id) for note_id in self.results.get(query, [])]
