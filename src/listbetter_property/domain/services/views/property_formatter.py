#!/usr/bin/env python3

"""Text rendering of property listings."""

import json
from typing import Any

from ...models import ListOptions, PropertyRecord
from ..introspection import list_properties

EMPTY_MESSAGE = "No properties found."
HEADER = "Properties:"
RULE = "─" * 60
VALUE_PREVIEW_LIMIT = 50
ELLIPSIS = "..."


def serialize_value(value: Any) -> str:
    """Serialize a member value as JSON text, using repr for unsupported objects."""
    try:
        return json.dumps(value, default=repr, ensure_ascii=False)
    except (TypeError, ValueError):
        # Non-string mapping keys or self-referencing containers
        return repr(value)


def truncate_value(text: str, limit: int = VALUE_PREVIEW_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def describe_attributes(record: PropertyRecord) -> list[str]:
    """Return attribute labels in fixed order."""
    attrs = []
    if not record.enumerable:
        attrs.append("non-enum")
    if not record.configurable:
        attrs.append("non-config")
    if record.writable is False:
        attrs.append("readonly")
    if record.has_getter:
        attrs.append("getter")
    if record.has_setter:
        attrs.append("setter")
    if not record.is_own:
        attrs.append("inherited")
    return attrs


def format_record(record: PropertyRecord, show_values: bool = False) -> str:
    """Render one record as a line plus an optional value line."""
    line = f"  {record.name}"
    if record.type:
        line += f" ({record.type})"

    attrs = describe_attributes(record)
    if attrs:
        line += f" [{', '.join(attrs)}]"

    if show_values and record.has_value:
        line += f"\n    Value: {truncate_value(serialize_value(record.value))}"
    return line


def display_properties(obj: Any, options: ListOptions | None = None) -> str:
    """
    Display properties in a formatted table-like string.

    Args:
        obj: Object to inspect
        options: Listing options; value lines are rendered only when
            ``show_values`` is explicitly True

    Returns:
        Formatted text, or ``"No properties found."`` for an empty listing

    Raises:
        InvalidInputError: If obj does not support member introspection
    """
    options = options or ListOptions()
    show_values = options.show_values is True
    properties = list_properties(obj, options.with_overrides(show_values=show_values))

    if not properties:
        return EMPTY_MESSAGE

    lines = [HEADER, RULE]
    lines.extend(format_record(prop, show_values) for prop in properties)
    return "\n".join(lines)
