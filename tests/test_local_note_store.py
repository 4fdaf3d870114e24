"""Tests for LocalNoteStore functionality."""

import json
import tempfile
from pathlib import Path

import pytest

from notesearch.domain.note import Note, Revision
from notesearch.note_store.local import LocalNoteStore
from tests.builders import label


@pytest.fixture
def parent_note() -> Note:
    return Note(
        id="projects",
        title="Projects",
        attributes=[label("project", "inherited", is_inheritable=True), label("local")],
    )


@pytest.fixture
def child_note() -> Note:
    return Note(
        id="project_a",
        title="Project A",
        parent_ids=["projects"],
        attributes=[label("status", "active")],
    )


def test_save_and_retrieve_note(child_note: Note) -> None:
    store = LocalNoteStore()
    store.save_note(child_note)

    retrieved = store.get_note("project_a")
    assert retrieved is not None, "Saved note should be retrievable"
    assert retrieved.title == "Project A", "Retrieved note title should match"
    assert retrieved.get_label_value("status") == "active", "Labels should be kept"

    assert store.get_note("missing") is None, "Unknown note IDs should return None"


def test_inherited_attributes(parent_note: Note, child_note: Note) -> None:
    store = LocalNoteStore.from_data(notes={"projects": parent_note, "project_a": child_note})

    child = store.get_note("project_a")

    assert child.get_label_value("project") == "inherited", "Inheritable labels are inherited"
    assert not child.has_label("local"), "Non-inheritable labels stay on the parent"
    assert child.get_owned_labels("project") == [], "Inherited labels are not owned"


def test_deleted_ancestors_are_not_inherited_from(parent_note: Note, child_note: Note) -> None:
    parent_note.is_deleted = True
    store = LocalNoteStore.from_data(notes={"projects": parent_note, "project_a": child_note})

    child = store.get_note("project_a")

    assert not child.has_label("project"), "Deleted ancestors should not pass on attributes"
    assert child.get_label_value("status") == "active"


def test_revisions(child_note: Note) -> None:
    store = LocalNoteStore.from_data(
        notes={"project_a": child_note},
        revisions={
            "r2": Revision(id="r2", note_id="project_a", date_created=2.0),
            "r1": Revision(id="r1", note_id="project_a", date_created=1.0),
            "r3": Revision(id="r3", note_id="other", date_created=3.0),
        },
    )

    assert [rev.id for rev in store.get_revisions("project_a")] == ["r1", "r2"]

    store.erase_note_revisions(["r1", "r2"])

    assert store.get_revisions("project_a") == [], "Erased revisions should be gone"
    assert [rev.id for rev in store.get_revisions("other")] == ["r3"]


def test_save_and_load_functionality(parent_note: Note, child_note: Note) -> None:
    """Test saving to and loading from file."""
    with tempfile.NamedTemporaryFile(suffix=".json", delete=False) as f:
        filepath = f.name

    Path(filepath).unlink()

    try:
        store = LocalNoteStore(filepath=filepath)
        store.save_note(parent_note)
        store.add_revision(Revision(id="r1", note_id="projects"))
        store.save_note(child_note)

        assert Path(filepath).exists(), "Saving a note should write the store file"
        with open(filepath, "r") as f:
            data = json.load(f)

        assert len(data["notes"]) == 2, "Should save 2 notes"
        assert len(data["revisions"]) == 1, "Should save 1 revision"
        assert "inherited_attributes" not in data["notes"]["project_a"], (
            "Inherited attributes should not be persisted"
        )

        new_store = LocalNoteStore(filepath=filepath)
        loaded = new_store.get_note("project_a")
        assert loaded is not None, "Child note should be loaded"
        assert loaded.get_label_value("project") == "inherited"
        assert [rev.id for rev in new_store.get_revisions("projects")] == ["r1"]
    finally:
        if Path(filepath).exists():
            Path(filepath).unlink()


def test_save_without_filepath() -> None:
    """Test that save() raises error when no filepath is set."""
    store = LocalNoteStore()

    with pytest.raises(ValueError, match="No filepath provided and no default filepath set"):
        store.save()
