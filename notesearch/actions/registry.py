"""Handlers applying search actions to matched notes."""

import logging
from typing import Awaitable, Callable

from notesearch.domain.action import (
    ACTION_TYPES,
    Action,
    BaseAction,
    DeleteLabelAction,
    DeleteNoteAction,
    DeleteNoteRevisionsAction,
    DeleteRelationAction,
    ExecuteScriptAction,
    RenameLabelAction,
    RenameRelationAction,
    SetLabelValueAction,
    SetRelationTargetAction,
)
from notesearch.domain.note import Note
from notesearch.note_store.base import NoteStore
from notesearch.scripting.base import ScriptRunner
from notesearch.scripting.note_api import NoteScriptApi

logger = logging.getLogger(__name__)

ActionHandler = Callable[[BaseAction, Note], Awaitable[None]]


class ActionRegistry:
    """Maps every action type to the handler that applies it to a note.

    Built once when the application starts and handed to the services that execute
    search notes.
    """

    def __init__(self, *, note_store: NoteStore, script_runner: ScriptRunner) -> None:
        self.note_store = note_store
        self.script_runner = script_runner

        self._handlers: dict[type[BaseAction], ActionHandler] = {
            DeleteNoteAction: self._delete_note,
            DeleteNoteRevisionsAction: self._delete_note_revisions,
            DeleteLabelAction: self._delete_label,
            DeleteRelationAction: self._delete_relation,
            RenameLabelAction: self._rename_label,
            RenameRelationAction: self._rename_relation,
            SetLabelValueAction: self._set_label_value,
            SetRelationTargetAction: self._set_relation_target,
            ExecuteScriptAction: self._execute_script,
        }  # type: ignore[dict-item]

        missing = [
            action_type.__name__ for action_type in ACTION_TYPES if not self.handles(action_type)
        ]
        if missing:
            raise ValueError(f"No search action handler registered for {', '.join(missing)}")

    def handles(self, action_type: type[BaseAction]) -> bool:
        return action_type in self._handlers

    async def apply(self, action: Action, note: Note) -> None:
        await self._handlers[type(action)](action, note)

    async def _delete_note(self, action: DeleteNoteAction, note: Note) -> None:
        note.is_deleted = True
        self.note_store.save_note(note)

    async def _delete_note_revisions(self, action: DeleteNoteRevisionsAction, note: Note) -> None:
        revisions = self.note_store.get_revisions(note.id)
        self.note_store.erase_note_revisions([revision.id for revision in revisions])

    async def _delete_label(self, action: DeleteLabelAction, note: Note) -> None:
        for label in note.get_owned_labels(action.label_name):
            label.is_deleted = True
        self.note_store.save_note(note)

    async def _delete_relation(self, action: DeleteRelationAction, note: Note) -> None:
        for relation in note.get_owned_relations(action.relation_name):
            relation.is_deleted = True
        self.note_store.save_note(note)

    async def _rename_label(self, action: RenameLabelAction, note: Note) -> None:
        for label in note.get_owned_labels(action.old_label_name):
            label.name = action.new_label_name
        self.note_store.save_note(note)

    async def _rename_relation(self, action: RenameRelationAction, note: Note) -> None:
        for relation in note.get_owned_relations(action.old_relation_name):
            relation.name = action.new_relation_name
        self.note_store.save_note(note)

    async def _set_label_value(self, action: SetLabelValueAction, note: Note) -> None:
        note.set_label(action.label_name, action.label_value)
        self.note_store.save_note(note)

    async def _set_relation_target(self, action: SetRelationTargetAction, note: Note) -> None:
        note.set_relation(action.relation_name, action.target_note_id)
        self.note_store.save_note(note)

    async def _execute_script(self, action: ExecuteScriptAction, note: Note) -> None:
        if not action.script.strip():
            logger.info("Ignoring executeScript since the script is empty.")
            return

        await self.script_runner.run_action_script(action.script, NoteScriptApi(note))
        self.note_store.save_note(note)
