#!/usr/bin/env python3

"""Structured object model with explicit member descriptors.

``StructuredObject`` keeps an ordered table of named descriptors and an
optional prototype link. Member lookup walks the prototype chain; writes
and deletes honour the ``writable`` and ``configurable`` flags.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .descriptors import UNDEFINED, AccessorDescriptor, DataDescriptor, PropertyDescriptor


class StructuredObject:
    """Object whose members are described by explicit descriptors."""

    def __init__(
        self,
        members: Mapping[str, Any] | None = None,
        prototype: StructuredObject | None = None,
    ) -> None:
        """Create an object from plain values.

        Args:
            members: Initial members; each becomes a writable, enumerable,
                configurable data member in mapping order
            prototype: Ancestor level to inherit members from
        """
        self._descriptors: dict[str, PropertyDescriptor] = {}
        self._prototype = prototype
        self._extensible = True
        for name, value in (members or {}).items():
            self._descriptors[name] = DataDescriptor(value=value)

    @property
    def prototype(self) -> StructuredObject | None:
        return self._prototype

    def define_property(self, name: str, descriptor: PropertyDescriptor) -> StructuredObject:
        """Define or redefine an own member.

        Raises:
            TypeError: If the existing member is non-configurable or the
                object has been frozen
        """
        existing = self._descriptors.get(name)
        if existing is None and not self._extensible:
            raise TypeError(f"Cannot define property {name!r}, object is not extensible")
        if existing is not None and not existing.configurable:
            raise TypeError(f"Cannot redefine non-configurable property {name!r}")
        self._descriptors[name] = descriptor
        return self

    def get_own_property_descriptor(self, name: str) -> PropertyDescriptor | None:
        return self._descriptors.get(name)

    def own_descriptors(self) -> list[tuple[str, PropertyDescriptor]]:
        """Return own members in definition order."""
        return list(self._descriptors.items())

    def own_keys(self) -> list[str]:
        return list(self._descriptors)

    def prototype_chain(self) -> list[StructuredObject]:
        """Return ancestor levels, nearest first."""
        chain: list[StructuredObject] = []
        current = self._prototype
        while current is not None and current not in chain:
            chain.append(current)
            current = current._prototype
        return chain

    def freeze(self) -> StructuredObject:
        """Make every own data member read-only and every member non-configurable."""
        for name, descriptor in self._descriptors.items():
            if isinstance(descriptor, DataDescriptor):
                self._descriptors[name] = DataDescriptor(
                    value=descriptor.value,
                    writable=False,
                    enumerable=descriptor.enumerable,
                    configurable=False,
                )
            else:
                self._descriptors[name] = AccessorDescriptor(
                    getter=descriptor.getter,
                    setter=descriptor.setter,
                    enumerable=descriptor.enumerable,
                    configurable=False,
                )
        self._extensible = False
        return self

    def _lookup(self, name: str) -> PropertyDescriptor | None:
        if name in self._descriptors:
            return self._descriptors[name]
        for level in self.prototype_chain():
            descriptor = level.get_own_property_descriptor(name)
            if descriptor is not None:
                return descriptor
        return None

    def __getitem__(self, name: str) -> Any:
        descriptor = self._lookup(name)
        if descriptor is None:
            return UNDEFINED
        if isinstance(descriptor, AccessorDescriptor):
            return descriptor.getter(self) if descriptor.getter else UNDEFINED
        return descriptor.value

    def __setitem__(self, name: str, value: Any) -> None:
        descriptor = self._lookup(name)
        if isinstance(descriptor, AccessorDescriptor):
            if descriptor.setter is None:
                raise TypeError(f"Cannot set property {name!r} which has only a getter")
            descriptor.setter(self, value)
            return
        if descriptor is not None and not descriptor.writable:
            raise TypeError(f"Cannot assign to read only property {name!r}")

        own = self._descriptors.get(name)
        if own is None:
            self.define_property(name, DataDescriptor(value=value))
        else:
            self._descriptors[name] = DataDescriptor(
                value=value,
                writable=own.writable,
                enumerable=own.enumerable,
                configurable=own.configurable,
            )

    def __delitem__(self, name: str) -> None:
        descriptor = self._descriptors.get(name)
        if descriptor is None:
            return
        if not descriptor.configurable:
            raise TypeError(f"Cannot delete non-configurable property {name!r}")
        del self._descriptors[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        """Iterate over enumerable own member names."""
        return (name for name, d in self._descriptors.items() if d.enumerable)

    def __repr__(self) -> str:
        return f"StructuredObject({self.own_keys()!r})"
