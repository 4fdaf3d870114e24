"""Search action domain models.

Actions are persisted as JSON inside ``action`` labels of a search note, for example
``{"name": "setLabelValue", "labelName": "status", "labelValue": "done"}``. The
``name`` field selects one of the models below.
"""

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class BaseAction(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeleteNoteAction(BaseAction):
    name: Literal["deleteNote"] = "deleteNote"


class DeleteNoteRevisionsAction(BaseAction):
    name: Literal["deleteNoteRevisions"] = "deleteNoteRevisions"


class DeleteLabelAction(BaseAction):
    name: Literal["deleteLabel"] = "deleteLabel"
    label_name: str


class DeleteRelationAction(BaseAction):
    name: Literal["deleteRelation"] = "deleteRelation"
    relation_name: str


class RenameLabelAction(BaseAction):
    name: Literal["renameLabel"] = "renameLabel"
    old_label_name: str
    new_label_name: str


class RenameRelationAction(BaseAction):
    name: Literal["renameRelation"] = "renameRelation"
    old_relation_name: str
    new_relation_name: str


class SetLabelValueAction(BaseAction):
    name: Literal["setLabelValue"] = "setLabelValue"
    label_name: str
    label_value: str = ""


class SetRelationTargetAction(BaseAction):
    name: Literal["setRelationTarget"] = "setRelationTarget"
    relation_name: str
    target_note_id: str


class ExecuteScriptAction(BaseAction):
    name: Literal["executeScript"] = "executeScript"
    script: str = ""


Action = Annotated[
    Union[
        DeleteNoteAction,
        DeleteNoteRevisionsAction,
        DeleteLabelAction,
        DeleteRelationAction,
        RenameLabelAction,
        RenameRelationAction,
        SetLabelValueAction,
        SetRelationTargetAction,
        ExecuteScriptAction,
    ],
    Field(discriminator="name"),
]

ACTION_TYPES: tuple[type[BaseAction], ...] = get_args(get_args(Action)[0])

action_adapter: TypeAdapter[Action] = TypeAdapter(Action)
