from typing import List, Protocol

from notesearch.domain.search import SearchContext, SearchResult


class QueryEngine(Protocol):
    def find_notes_with_query(
        self, query: str, search_context: SearchContext
    ) -> List[SearchResult]:
        """Evaluate a query string and return ranked matches."""
        ...
