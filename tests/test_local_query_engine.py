"""Tests for the in-memory query engine."""

import pytest

from notesearch.domain.note import Note
from notesearch.domain.search import SearchContext
from notesearch.note_store.local import LocalNoteStore
from notesearch.query_engine.local import LocalQueryEngine, parse_query
from notesearch.search.formatter import format_attribute_for_search
from tests.builders import label, relation


@pytest.fixture
def engine() -> LocalQueryEngine:
    notes = {
        "root": Note(id="root", title="root"),
        "projects": Note(id="projects", title="Projects", parent_ids=["root"]),
        "alpha": Note(
            id="alpha",
            title="Alpha plan",
            content="kickoff next week",
            parent_ids=["projects"],
            attributes=[label("status", "in progress"), relation("owner", "bob")],
        ),
        "beta": Note(
            id="beta",
            title="Beta plan",
            parent_ids=["projects"],
            attributes=[label("status", "done"), label("archived")],
        ),
        "gamma": Note(
            id="gamma",
            title="Gamma notes",
            parent_ids=["alpha"],
            attributes=[label("status", 'it\'s "odd"')],
        ),
        "trash": Note(id="trash", title="Deleted plan", is_deleted=True),
    }
    return LocalQueryEngine(LocalNoteStore.from_data(notes=notes))


def find_ids(engine: LocalQueryEngine, query: str, **context) -> list[str]:
    return [
        result.note_id
        for result in engine.find_notes_with_query(query, SearchContext(**context))
    ]


def test_parse_query_terms() -> None:
    terms = parse_query('plan #status="in progress" ~owner.noteId=bob #todo')

    assert [(term.kind, term.name, term.value) for term in terms] == [
        ("text", "plan", None),
        ("label", "status", "in progress"),
        ("relation", "owner", "bob"),
        ("label", "todo", None),
    ]


def test_text_search_skips_deleted_and_archived(engine: LocalQueryEngine) -> None:
    assert find_ids(engine, "plan") == ["alpha"]
    assert sorted(find_ids(engine, "plan", include_archived_notes=True)) == ["alpha", "beta"]


def test_fast_search_ignores_content(engine: LocalQueryEngine) -> None:
    assert find_ids(engine, "kickoff") == ["alpha"]
    assert find_ids(engine, "kickoff", fast_search=True) == []


def test_formatted_fragments_round_trip(engine: LocalQueryEngine) -> None:
    for attribute, expected in [
        (label("status", "in progress"), ["alpha"]),
        (label("status", 'it\'s "odd"'), ["gamma"]),
        (relation("owner", "bob"), ["alpha"]),
    ]:
        query = format_attribute_for_search(attribute, True)
        assert find_ids(engine, query) == expected, query


def test_fuzzy_attribute_search(engine: LocalQueryEngine) -> None:
    assert find_ids(engine, "#status=progress") == []
    assert find_ids(engine, "#status=progress", fuzzy_attribute_search=True) == ["alpha"]


def test_ancestor_scope_and_depth(engine: LocalQueryEngine) -> None:
    assert sorted(find_ids(engine, "#status", ancestor_note_id="projects")) == ["alpha", "gamma"]
    assert find_ids(engine, "#status", ancestor_note_id="projects", ancestor_depth="eq1") == [
        "alpha"
    ]
    assert find_ids(engine, "#status", ancestor_note_id="projects", ancestor_depth="gt1") == [
        "gamma"
    ]


def test_order_and_limit(engine: LocalQueryEngine) -> None:
    ordered = find_ids(
        engine,
        "#status",
        include_archived_notes=True,
        order_by="title",
        order_direction="desc",
    )
    assert ordered == ["gamma", "beta", "alpha"]

    assert len(find_ids(engine, "#status", include_archived_notes=True, limit=2)) == 2


def test_empty_query_matches_nothing(engine: LocalQueryEngine) -> None:
    assert find_ids(engine, "   ") == []
