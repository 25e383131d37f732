#!/usr/bin/env python3

"""Aggregated views over property listings: grouping by type and counting."""

from typing import Any

from ....infrastructure.logging import get_logger
from ...models import CountReport, ListOptions
from ..introspection import list_properties

logger = get_logger(__name__)

UNKNOWN_TYPE = "unknown"


def group_by_type(obj: Any) -> dict[str, list[str]]:
    """
    Get property names grouped by their type.

    Members without a type (accessors and absent values) are grouped under
    ``"unknown"``. Keys follow first occurrence; names keep listing order.

    Args:
        obj: Object to inspect

    Returns:
        Mapping of type name to member names
    """
    properties = list_properties(obj, ListOptions(show_types=True, show_values=False))
    grouped: dict[str, list[str]] = {}

    for prop in properties:
        grouped.setdefault(prop.type or UNKNOWN_TYPE, []).append(prop.name)

    logger.debug(f"Grouped {len(properties)} member(s) into {len(grouped)} type(s)")
    return grouped


def count_properties(obj: Any) -> CountReport:
    """
    Count own properties by various criteria, hidden members included.

    Args:
        obj: Object to inspect

    Returns:
        CountReport with the statistics
    """
    properties = list_properties(
        obj,
        ListOptions(include_non_enumerable=True, include_inherited=False),
    )

    return CountReport(
        total=len(properties),
        enumerable=sum(1 for p in properties if p.enumerable),
        non_enumerable=sum(1 for p in properties if not p.enumerable),
        writable=sum(1 for p in properties if p.writable),
        readonly=sum(1 for p in properties if p.writable is False),
        with_getters=sum(1 for p in properties if p.has_getter),
        with_setters=sum(1 for p in properties if p.has_setter),
    )
