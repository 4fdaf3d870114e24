import logging
from typing import Any

from notesearch.domain.note import Note
from notesearch.exceptions import ScriptingDisabledError
from notesearch.scripting.base import ScriptRunner
from notesearch.scripting.note_api import NoteScriptApi

logger = logging.getLogger(__name__)


class DisabledScriptRunner(ScriptRunner):
    """Script runner for deployments without a sandbox.

    Search scripts produce no results and action scripts fail, which the
    executing service logs per note without stopping the batch.
    """

    async def execute_note(self, script_note: Note, *, origin_entity: Note) -> Any:
        logger.info(
            f"Scripting is disabled, not running {script_note.id} "
            f"for search note {origin_entity.id}"
        )
        return None

    async def run_action_script(self, script: str, note: NoteScriptApi) -> None:
        raise ScriptingDisabledError(f"Scripting is disabled, cannot run script on {note.note_id}")
