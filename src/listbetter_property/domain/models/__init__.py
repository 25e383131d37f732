#!/usr/bin/env python3

"""Domain models for property inspection."""

from .count_report import CountReport
from .descriptors import (
    UNDEFINED,
    AccessorDescriptor,
    DataDescriptor,
    PropertyDescriptor,
    is_defined,
)
from .list_options import ListOptions
from .property_record import PropertyRecord
from .structured_object import StructuredObject

__all__ = [
    "AccessorDescriptor",
    "CountReport",
    "DataDescriptor",
    "ListOptions",
    "PropertyDescriptor",
    "PropertyRecord",
    "StructuredObject",
    "UNDEFINED",
    "is_defined",
]
