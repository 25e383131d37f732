#!/usr/bin/env python3

"""Member discovery and property enumeration."""

from .descriptor_source import (
    DescriptorSource,
    ReflectionDescriptorSource,
    ancestor_levels,
    default_source,
    describe_attribute,
    describe_own_members,
)
from .property_enumerator import PropertyEnumerator, list_properties

__all__ = [
    "DescriptorSource",
    "PropertyEnumerator",
    "ReflectionDescriptorSource",
    "ancestor_levels",
    "default_source",
    "describe_attribute",
    "describe_own_members",
    "list_properties",
]
