"""Extraction of search actions from a note's `action` labels."""

import json
import logging

from pydantic import ValidationError

from notesearch.domain.action import Action, action_adapter
from notesearch.domain.note import Note

logger = logging.getLogger(__name__)

ACTION_LABEL = "action"

_UNKNOWN_ACTION_ERRORS = {"union_tag_invalid", "union_tag_not_found"}


class ActionParser:
    def parse(self, note: Note) -> list[Action]:
        """Decode every `action` label of the note, skipping the ones that cannot run.

        Later actions may depend on state set by earlier ones, so the label order is kept.
        """
        actions = []
        for label in note.get_labels(ACTION_LABEL):
            action = self._parse_label_value(label.value)
            if action is not None:
                actions.append(action)
        return actions

    def _parse_label_value(self, value: str) -> Action | None:
        try:
            data = json.loads(value)
        except json.JSONDecodeError:
            logger.error(f"Cannot parse '{value}' into search action, skipping.")
            return None

        try:
            action = action_adapter.validate_python(data)
        except ValidationError as e:
            if any(error["type"] in _UNKNOWN_ACTION_ERRORS for error in e.errors()):
                name = data.get("name") if isinstance(data, dict) else None
                logger.error(f"Cannot find '{name}' search action handler, skipping.")
            else:
                logger.error(f"Invalid search action '{value}': {e}, skipping.")
            return None

        return action
