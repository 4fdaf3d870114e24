"""Formatting of note attributes as query fragments."""

import re

from notesearch.domain.note import Attribute

_PLAIN_VALUE_PATTERN = re.compile(r"[^\w_-]", re.ASCII)


def format_attribute_for_search(attribute: Attribute, search_with_value: bool) -> str:
    """Build a query fragment matching notes that carry the given attribute.

    Args:
        attribute: Label or relation to search for
        search_with_value: Also require the attribute value to match. Relations are
            matched on the target note ID.

    Returns:
        Query fragment such as `#status`, `#status=done` or `~author.noteId=abc123`

    Raises:
        ValueError: If the attribute type is neither label nor relation
    """
    if attribute.type == "label":
        query = "#"
    elif attribute.type == "relation":
        query = "~"
    else:
        raise ValueError(f"Unrecognized attribute type {attribute.type!r} of {attribute.name!r}")

    query += attribute.name

    if search_with_value and attribute.value:
        if attribute.type == "relation":
            query += ".noteId"

        query += "=" + format_value(attribute.value)

    return query


def format_value(value: str) -> str:
    """Quote a value with the least intrusive quoting that keeps it unambiguous."""
    if not _PLAIN_VALUE_PATTERN.search(value):
        return value
    elif '"' not in value:
        return f'"{value}"'
    elif "'" not in value:
        return f"'{value}'"
    elif "`" not in value:
        return f"`{value}`"
    else:
        return '"' + value.replace('"', '\\"') + '"'
