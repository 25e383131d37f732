#!/usr/bin/env python3

"""Property enumeration over own members and ancestor levels."""

from collections.abc import Iterable
from typing import Any

from ....infrastructure.logging import get_logger, log_timing
from ...models import (
    UNDEFINED,
    AccessorDescriptor,
    ListOptions,
    PropertyDescriptor,
    PropertyRecord,
    is_defined,
)
from .descriptor_source import DescriptorSource, default_source

logger = get_logger(__name__)


class PropertyEnumerator:
    """Walks the descriptor set of an object and yields one record per member.

    Own members come first in declaration order, followed by each ancestor
    level in order. A name is reported at most once: the nearest declaration
    wins, even when it is hidden by the enumerability filter.
    """

    def __init__(self, source: DescriptorSource | None = None):
        """Initialize the enumerator with a descriptor source.

        Args:
            source: Capability answering member and ancestor queries
                (defaults to Python reflection)
        """
        self.source = source or default_source

    def collect(
        self,
        obj: Any,
        options: ListOptions | None = None,
        ancestors: Iterable[Any] | None = None,
    ) -> list[PropertyRecord]:
        """List the members of an object.

        Args:
            obj: Object to inspect
            options: Listing options (defaults to ``ListOptions()``)
            ancestors: Explicit ancestor levels, nearest first; replaces the
                levels discovered by the source when inheritance is included

        Returns:
            Ordered list of PropertyRecord

        Raises:
            InvalidInputError: If obj does not support member introspection
        """
        options = options or ListOptions()
        records: list[PropertyRecord] = []
        seen: set[str] = set()

        self._add_level(self.source.describe_own_members(obj), True, options, seen, records)

        if options.include_inherited:
            levels = list(ancestors) if ancestors is not None else self.source.ancestor_levels(obj)
            logger.debug(f"Walking {len(levels)} ancestor level(s) of {type(obj).__name__}")
            for level in levels:
                if level is object:
                    continue
                members = self.source.describe_own_members(level)
                self._add_level(members, False, options, seen, records)

        logger.debug(f"Listed {len(records)} member(s) of {type(obj).__name__}")
        return records

    def _add_level(
        self,
        members: list[tuple[str, PropertyDescriptor]],
        is_own: bool,
        options: ListOptions,
        seen: set[str],
        records: list[PropertyRecord],
    ) -> None:
        for name, descriptor in members:
            if name in seen:
                continue
            seen.add(name)

            if not descriptor.enumerable and not options.include_non_enumerable:
                continue

            records.append(self._build_record(name, descriptor, is_own, options))

    @staticmethod
    def _build_record(
        name: str,
        descriptor: PropertyDescriptor,
        is_own: bool,
        options: ListOptions,
    ) -> PropertyRecord:
        if isinstance(descriptor, AccessorDescriptor):
            return PropertyRecord(
                name=name,
                enumerable=descriptor.enumerable,
                configurable=descriptor.configurable,
                writable=None,
                is_own=is_own,
                has_getter=True if descriptor.has_getter else None,
                has_setter=True if descriptor.has_setter else None,
            )

        defined = is_defined(descriptor.value)
        return PropertyRecord(
            name=name,
            enumerable=descriptor.enumerable,
            configurable=descriptor.configurable,
            writable=descriptor.writable,
            is_own=is_own,
            type=type(descriptor.value).__name__ if options.show_types and defined else None,
            value=descriptor.value if options.show_values is not False and defined else UNDEFINED,
        )


@log_timing
def list_properties(
    obj: Any,
    options: ListOptions | None = None,
    *,
    ancestors: Iterable[Any] | None = None,
    source: DescriptorSource | None = None,
) -> list[PropertyRecord]:
    """
    List all properties of an object with detailed information.

    Args:
        obj: Object to inspect
        options: Listing options; unspecified options take their defaults
        ancestors: Explicit ancestor levels to walk instead of the discovered ones
        source: Descriptor source to query instead of the default reflection

    Returns:
        Ordered list of PropertyRecord, one per member name

    Raises:
        InvalidInputError: If obj is None, UNDEFINED or a primitive value
    """
    return PropertyEnumerator(source).collect(obj, options, ancestors)
