#!/usr/bin/env python3

"""Derived views over property listings."""

from .property_aggregator import UNKNOWN_TYPE, count_properties, group_by_type
from .property_formatter import EMPTY_MESSAGE, display_properties, format_record

__all__ = [
    "EMPTY_MESSAGE",
    "UNKNOWN_TYPE",
    "count_properties",
    "display_properties",
    "format_record",
    "group_by_type",
]
