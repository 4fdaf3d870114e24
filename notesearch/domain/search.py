"""Search domain models."""

from pydantic import BaseModel, field_validator


class SearchContext(BaseModel):
    """Execution settings for a single query evaluation.

    Attributes:
        fast_search: Match only titles and attributes, skip note content
        ancestor_note_id: Restrict results to descendants of this note
        ancestor_depth: Depth constraint relative to the ancestor, e.g. "eq1", "lt3", "gt2"
        include_archived_notes: Whether notes labeled "archived" may match
        order_by: Note property or label name to order results by
        order_direction: "asc" or "desc"
        limit: Maximum number of results
        debug: Log query evaluation details
        fuzzy_attribute_search: Allow partial matches on attribute names and values
    """

    fast_search: bool = False
    ancestor_note_id: str | None = None
    ancestor_depth: str | None = None
    include_archived_notes: bool = False
    order_by: str | None = None
    order_direction: str | None = None
    limit: int | None = None
    debug: bool = False
    fuzzy_attribute_search: bool = False

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, value: object) -> int | None:
        # label values are free text, anything that is not a number means no limit
        if isinstance(value, str):
            value = value.strip()
            return int(value) if value.isdecimal() else None
        return value  # type: ignore[return-value]


class SearchResult(BaseModel):
    """A ranked match returned by the query engine."""

    note_id: str
    score: float = 0.0


class RelatedNotes(BaseModel):
    count: int
    results: list[SearchResult]
