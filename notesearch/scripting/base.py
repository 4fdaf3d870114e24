from typing import Any, Protocol

from notesearch.domain.note import Note
from notesearch.scripting.note_api import NoteScriptApi


class ScriptRunner(Protocol):
    """Host-provided sandbox that evaluates user scripts."""

    async def execute_note(self, script_note: Note, *, origin_entity: Note) -> Any:
        """Run the body of a script note and return whatever the script produced."""
        ...

    async def run_action_script(self, script: str, note: NoteScriptApi) -> None:
        """Run an action script with `note` as its only reachable object."""
        ...
