#!/usr/bin/env python3

"""Domain services layer."""

from . import introspection, views
from .introspection import list_properties
from .views import count_properties, display_properties, group_by_type

__all__ = [
    "count_properties",
    "display_properties",
    "group_by_type",
    "introspection",
    "list_properties",
    "views",
]
