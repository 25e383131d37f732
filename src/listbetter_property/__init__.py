"""ListBetter Property - list and describe the members of Python objects."""

from .domain.errors import InvalidInputError
from .domain.models import (
    UNDEFINED,
    AccessorDescriptor,
    CountReport,
    DataDescriptor,
    ListOptions,
    PropertyDescriptor,
    PropertyRecord,
    StructuredObject,
)
from .domain.services import count_properties, display_properties, group_by_type, list_properties
from .domain.services.introspection import ReflectionDescriptorSource
from .infrastructure.config import Config

__version__ = "0.1.0"

__all__ = [
    "AccessorDescriptor",
    "Config",
    "CountReport",
    "DataDescriptor",
    "InvalidInputError",
    "ListOptions",
    "PropertyDescriptor",
    "PropertyRecord",
    "ReflectionDescriptorSource",
    "StructuredObject",
    "UNDEFINED",
    "count_properties",
    "display_properties",
    "group_by_type",
    "list_properties",
]
