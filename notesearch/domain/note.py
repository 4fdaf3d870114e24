"""Note domain models."""

from typing import Literal

from pydantic import BaseModel, Field

BACKEND_SCRIPT_ENV = "env=backend"


class Attribute(BaseModel):
    """A label or relation attached to a note.

    Attributes:
        type: Either "label" or "relation"
        name: Attribute name, several attributes may share one name
        value: Label text, or the target note ID for a relation
        is_deleted: Soft-delete flag, deleted attributes are ignored by lookups
        is_inheritable: Whether child notes inherit the attribute
    """

    type: Literal["label", "relation"]
    name: str
    value: str = ""
    is_deleted: bool = False
    is_inheritable: bool = False


class Revision(BaseModel):
    """A stored snapshot of a note's earlier content."""

    id: str
    note_id: str
    title: str = ""
    date_created: float = 0.0


class Note(BaseModel):
    """Represents a node in the note graph.

    Attributes:
        id: Unique identifier
        title: Note title
        type: Note type, only "search" notes carry a query and actions
        mime: MIME type, for code notes it also carries the script environment
        content: Note body
        is_deleted: Soft-delete flag
        is_content_available: False when the note is protected and the session
            has no access to it
        parent_ids: IDs of the parent notes in the tree
        attributes: Owned labels and relations in insertion order
        inherited_attributes: Attributes inherited from ancestors, filled in by the
            store and never persisted with the note
    """

    id: str
    title: str = ""
    type: str = "text"
    mime: str = "text/html"
    content: str = ""
    is_deleted: bool = False
    is_content_available: bool = True
    parent_ids: list[str] = []
    attributes: list[Attribute] = []
    inherited_attributes: list[Attribute] = Field(default=[], exclude=True)

    @property
    def is_search(self) -> bool:
        return self.type == "search"

    @property
    def is_backend_script(self) -> bool:
        return self.type == "code" and BACKEND_SCRIPT_ENV in self.mime.replace(" ", "")

    def _active(
        self, attributes: list[Attribute], attribute_type: str, name: str | None
    ) -> list[Attribute]:
        return [
            attr
            for attr in attributes
            if attr.type == attribute_type
            and not attr.is_deleted
            and (name is None or attr.name == name)
        ]

    def get_owned_labels(self, name: str | None = None) -> list[Attribute]:
        return self._active(self.attributes, "label", name)

    def get_owned_relations(self, name: str | None = None) -> list[Attribute]:
        return self._active(self.attributes, "relation", name)

    def get_labels(self, name: str | None = None) -> list[Attribute]:
        """Owned labels first, then inherited ones."""
        return self.get_owned_labels(name) + self._active(
            self.inherited_attributes, "label", name
        )

    def get_relations(self, name: str | None = None) -> list[Attribute]:
        return self.get_owned_relations(name) + self._active(
            self.inherited_attributes, "relation", name
        )

    def has_label(self, name: str) -> bool:
        return len(self.get_labels(name)) > 0

    def get_label_value(self, name: str) -> str | None:
        labels = self.get_labels(name)
        return labels[0].value if labels else None

    def get_relation_value(self, name: str) -> str | None:
        relations = self.get_relations(name)
        return relations[0].value if relations else None

    def set_label(self, name: str, value: str = "") -> None:
        """Create or update the owned label so exactly one active label carries the name."""
        self._set_attribute("label", name, value)

    def set_relation(self, name: str, target_note_id: str) -> None:
        """Create or update the owned relation so exactly one active relation carries the name."""
        self._set_attribute("relation", name, target_note_id)

    def _set_attribute(
        self, attribute_type: Literal["label", "relation"], name: str, value: str
    ) -> None:
        existing = self._active(self.attributes, attribute_type, name)
        if not existing:
            self.attributes.append(Attribute(type=attribute_type, name=name, value=value))
            return

        existing[0].value = value
        for duplicate in existing[1:]:
            duplicate.is_deleted = True
