"""Minimal query engine evaluating queries against a note store in memory.

Understands space separated terms:

- `#name` / `#name=value`: label present / label with that value
- `~name` / `~name.noteId=value`: relation present / relation targeting that note
- anything else: a word that must appear in the title (or content, unless fast search)

Values may be quoted with double quotes, single quotes or backticks.
"""

import logging
import re
from collections import deque
from dataclasses import dataclass
from typing import List

from notesearch.domain.note import Note
from notesearch.domain.search import SearchContext, SearchResult
from notesearch.note_store.base import NoteStore
from notesearch.query_engine.base import QueryEngine

logger = logging.getLogger(__name__)

_QUOTED = r'"(?:\\.|[^"\\])*"|\'[^\']*\'|`[^`]*`'
_TOKEN_PATTERN = re.compile(
    rf"(?P<prefix>[#~])(?P<name>[^\s=.]+)(?:\.noteId)?(?:=(?P<value>{_QUOTED}|\S+))?"
    rf"|(?P<text>{_QUOTED}|\S+)"
)
_DEPTH_PATTERN = re.compile(r"^(eq|lt|gt)(\d+)$")


@dataclass
class _Term:
    kind: str  # "label", "relation" or "text"
    name: str
    value: str | None = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'`":
        inner = value[1:-1]
        return inner.replace('\\"', '"') if value[0] == '"' else inner
    return value


def parse_query(query: str) -> list[_Term]:
    terms = []
    for match in _TOKEN_PATTERN.finditer(query):
        if match.group("prefix"):
            value = match.group("value")
            terms.append(
                _Term(
                    kind="label" if match.group("prefix") == "#" else "relation",
                    name=match.group("name"),
                    value=_unquote(value) if value is not None else None,
                )
            )
        else:
            terms.append(_Term(kind="text", name=_unquote(match.group("text"))))
    return terms


class LocalQueryEngine(QueryEngine):
    """Query engine scanning every note of a note store."""

    def __init__(self, note_store: NoteStore) -> None:
        self.note_store = note_store

    def find_notes_with_query(
        self, query: str, search_context: SearchContext
    ) -> List[SearchResult]:
        terms = parse_query(query)
        if search_context.debug:
            logger.info(f"Query '{query}' parsed into {terms}")

        if not terms:
            return []

        results = []
        for note in self.note_store.get_all_notes():
            if note.is_deleted:
                continue
            if not search_context.include_archived_notes and note.has_label("archived"):
                continue
            if search_context.ancestor_note_id and not self._is_within_ancestor(
                note, search_context.ancestor_note_id, search_context.ancestor_depth
            ):
                continue

            score = self._score(note, terms, search_context)
            if score is not None:
                results.append((note, score))

        results = self._order(results, search_context)
        if search_context.limit is not None:
            results = results[: search_context.limit]

        return [SearchResult(note_id=note.id, score=score) for note, score in results]

    def _score(
        self, note: Note, terms: list[_Term], search_context: SearchContext
    ) -> float | None:
        """Score a note against all terms, None when any term does not match."""
        score = 0.0
        for term in terms:
            if term.kind == "text":
                word = term.name.lower()
                if word in note.title.lower():
                    score += 1.0
                elif not search_context.fast_search and word in note.content.lower():
                    score += 0.5
                else:
                    return None
                continue

            if term.kind == "label":
                attributes = note.get_labels(term.name)
            else:
                attributes = note.get_relations(term.name)
            if term.value is None:
                matched = bool(attributes)
            elif search_context.fuzzy_attribute_search:
                matched = any(term.value.lower() in attr.value.lower() for attr in attributes)
            else:
                matched = any(attr.value == term.value for attr in attributes)

            if not matched:
                return None
            score += 1.0
        return score

    def _is_within_ancestor(self, note: Note, ancestor_note_id: str, depth: str | None) -> bool:
        distance = self._distance_to_ancestor(note, ancestor_note_id)
        if distance is None:
            return False

        match = _DEPTH_PATTERN.match(depth or "")
        if not match:
            return True

        operator, limit = match.group(1), int(match.group(2))
        if operator == "eq":
            return distance == limit
        if operator == "lt":
            return distance < limit
        return distance > limit

    def _distance_to_ancestor(self, note: Note, ancestor_note_id: str) -> int | None:
        visited = {note.id}
        queue = deque((parent_id, 1) for parent_id in note.parent_ids)

        while queue:
            current_id, distance = queue.popleft()
            if current_id == ancestor_note_id:
                return distance
            if current_id in visited:
                continue
            visited.add(current_id)

            parent = self.note_store.get_note(current_id)
            if parent:
                queue.extend((parent_id, distance + 1) for parent_id in parent.parent_ids)

        return None

    @staticmethod
    def _order(
        results: list[tuple[Note, float]], search_context: SearchContext
    ) -> list[tuple[Note, float]]:
        descending = (search_context.order_direction or "").lower() == "desc"
        order_by = search_context.order_by

        if not order_by:
            return sorted(results, key=lambda item: item[1], reverse=True)

        def sort_key(item: tuple[Note, float]) -> str:
            note = item[0]
            if order_by in ("title", "type", "mime", "content"):
                return getattr(note, order_by)
            return note.get_label_value(order_by) or ""

        return sorted(results, key=sort_key, reverse=descending)
