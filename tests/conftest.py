import pytest
from fastapi.testclient import TestClient

from notesearch.actions.registry import ActionRegistry
from notesearch.api import create_app
from notesearch.domain.note import Note, Revision
from notesearch.note_store.local import LocalNoteStore
from notesearch.search.resolver import SearchResolver
from notesearch.services.search_service import SearchNoteService
from tests.builders import action_label, label, relation
from tests.fakes import FakeQueryEngine, FakeScriptRunner


@pytest.fixture
def test_notes() -> dict[str, Note]:
    return {
        "root": Note(id="root", title="root"),
        "search1": Note(
            id="search1",
            title="Open tasks",
            type="search",
            parent_ids=["root"],
            attributes=[
                label("searchString", "#todo"),
                action_label(name="setLabelValue", labelName="status", labelValue="done"),
                action_label(name="renameLabel", oldLabelName="todo", newLabelName="done"),
            ],
        ),
        "note1": Note(
            id="note1",
            title="Buy milk",
            parent_ids=["root"],
            attributes=[label("todo"), label("priority", "high")],
        ),
        "note2": Note(
            id="note2",
            title="Call Bob",
            parent_ids=["root"],
            attributes=[label("todo"), relation("assignee", "bob")],
        ),
        "note3": Note(
            id="note3",
            title="Write report",
            parent_ids=["root"],
            attributes=[label("todo"), label("status", "in progress")],
        ),
        "text1": Note(id="text1", title="Plain text note", parent_ids=["root"]),
        "script1": Note(
            id="script1",
            title="Search script",
            type="code",
            mime="application/javascript;env=backend",
            parent_ids=["root"],
        ),
    }


@pytest.fixture
def test_revisions() -> dict[str, Revision]:
    return {
        "rev1": Revision(id="rev1", note_id="note1", title="Buy milk", date_created=1.0),
        "rev2": Revision(id="rev2", note_id="note1", title="Buy milk!", date_created=2.0),
        "rev3": Revision(id="rev3", note_id="note2", title="Call Bob", date_created=3.0),
    }


@pytest.fixture
def note_store(
    test_notes: dict[str, Note], test_revisions: dict[str, Revision]
) -> LocalNoteStore:
    return LocalNoteStore.from_data(notes=test_notes, revisions=test_revisions)


@pytest.fixture
def fake_query_engine() -> FakeQueryEngine:
    return FakeQueryEngine(
        results={
            "#todo": ["note1", "note2", "note3"],
            "milk": ["note1"],
        }
    )


@pytest.fixture
def fake_script_runner() -> FakeScriptRunner:
    return FakeScriptRunner()


@pytest.fixture
def registry(note_store: LocalNoteStore, fake_script_runner: FakeScriptRunner) -> ActionRegistry:
    return ActionRegistry(note_store=note_store, script_runner=fake_script_runner)


@pytest.fixture
def resolver(
    note_store: LocalNoteStore,
    fake_query_engine: FakeQueryEngine,
    fake_script_runner: FakeScriptRunner,
) -> SearchResolver:
    return SearchResolver(
        note_store=note_store,
        query_engine=fake_query_engine,
        script_runner=fake_script_runner,
    )


@pytest.fixture
def search_service(
    note_store: LocalNoteStore,
    fake_query_engine: FakeQueryEngine,
    resolver: SearchResolver,
    registry: ActionRegistry,
) -> SearchNoteService:
    return SearchNoteService(
        note_store=note_store,
        query_engine=fake_query_engine,
        resolver=resolver,
        registry=registry,
    )


@pytest.fixture
def test_client(
    note_store: LocalNoteStore,
    fake_query_engine: FakeQueryEngine,
    fake_script_runner: FakeScriptRunner,
) -> TestClient:
    """Create test client with fake implementations."""
    app = create_app(
        note_store=note_store,
        query_engine=fake_query_engine,
        script_runner=fake_script_runner,
    )
    return TestClient(app)
