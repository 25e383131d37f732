#!/usr/bin/env python3

"""Descriptor sources: how an object's members and ancestor levels are discovered.

The enumerator never reflects on objects directly. It asks a descriptor
source for two things:

- ``describe_own_members(obj)``: ordered ``(name, PropertyDescriptor)`` pairs
  declared directly on the object
- ``ancestor_levels(obj)``: the objects it inherits members from, nearest
  first, without the implicit root ``object``

``ReflectionDescriptorSource`` answers both from Python's object model and
accepts explicit per-type registrations that take precedence over it.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from ....infrastructure.logging import get_logger
from ...errors import InvalidInputError
from ...models import UNDEFINED, AccessorDescriptor, DataDescriptor, PropertyDescriptor, StructuredObject

logger = get_logger(__name__)

MemberTable = list[tuple[str, PropertyDescriptor]]
DescribeFunc = Callable[[Any], Iterable[tuple[str, PropertyDescriptor]]]
AncestorsFunc = Callable[[Any], Iterable[Any]]

# Values with no member table of their own; they are not auto-boxed
PRIMITIVE_TYPES: tuple[type, ...] = (bool, int, float, complex, str, bytes, bytearray)

# CPython sets this flag on classes created by class statements; static
# (builtin and extension) types reject attribute assignment
_HEAPTYPE_FLAG = 1 << 9


class DescriptorSource(Protocol):
    """Capability interface consumed by the property enumerator."""

    def describe_own_members(self, obj: Any) -> MemberTable: ...

    def ancestor_levels(self, obj: Any) -> list[Any]: ...


@dataclass(frozen=True)
class _Registration:
    describe: DescribeFunc
    ancestors: AncestorsFunc | None = None


def is_public_name(name: str) -> bool:
    """Names starting with an underscore are hidden from generic enumeration."""
    return not name.startswith("_")


def _is_mutable_class(cls: type) -> bool:
    return bool(getattr(cls, "__flags__", _HEAPTYPE_FLAG) & _HEAPTYPE_FLAG)


def _is_frozen_instance(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def describe_attribute(
    name: str,
    attr: Any,
    *,
    writable: bool = True,
    configurable: bool = True,
) -> PropertyDescriptor:
    """Build a descriptor for an attribute found in a class or module namespace.

    Args:
        name: Attribute name
        attr: Raw namespace entry (not resolved through ``__get__``)
        writable: Whether the namespace accepts assignment
        configurable: Whether the namespace accepts deletion

    Returns:
        AccessorDescriptor for properties and other data descriptors,
        DataDescriptor otherwise
    """
    enumerable = is_public_name(name)

    if isinstance(attr, property):
        return AccessorDescriptor(
            getter=attr.fget,
            setter=attr.fset,
            enumerable=enumerable,
            configurable=configurable,
        )

    if isinstance(attr, (staticmethod, classmethod)):
        return DataDescriptor(
            value=attr.__func__,
            writable=writable,
            enumerable=enumerable,
            configurable=configurable,
        )

    if inspect.isdatadescriptor(attr):
        attr_type = type(attr)
        return AccessorDescriptor(
            getter=attr.__get__ if hasattr(attr_type, "__get__") else None,
            setter=attr.__set__ if hasattr(attr_type, "__set__") else None,
            enumerable=enumerable,
            configurable=configurable,
        )

    return DataDescriptor(
        value=attr,
        writable=writable,
        enumerable=enumerable,
        configurable=configurable,
    )


def _slot_names(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)

    names = []
    for slot in slots:
        if slot in ("__dict__", "__weakref__"):
            continue
        # Private slot names are stored mangled
        if slot.startswith("__") and not slot.endswith("__"):
            slot = f"_{cls.__name__.lstrip('_')}{slot}"
        names.append(slot)
    return names


class ReflectionDescriptorSource:
    """Descriptor source backed by Python's object model.

    Supported subjects:
    - ``StructuredObject``: its explicit descriptor table and prototype chain
    - mappings: keys as member names, no ancestors
    - named tuples and other non-text sequences: fields or indices, no ancestors
    - classes: their namespace; ancestors are the MRO without ``object``
    - modules: their namespace, no ancestors
    - any other instance: ``__dict__`` then filled ``__slots__``; ancestors are
      the classes of its MRO without ``object``
    """

    def __init__(self) -> None:
        self._registry: dict[type, _Registration] = {}

    def register(
        self,
        cls: type,
        describe: DescribeFunc,
        ancestors: AncestorsFunc | None = None,
    ) -> None:
        """
        Register explicit member discovery for instances of a type.

        Args:
            cls: Type whose instances (including subclasses) use the registration
            describe: Returns ordered ``(name, descriptor)`` pairs for an instance
            ancestors: Returns the instance's ancestor levels; none if omitted
        """
        self._registry[cls] = _Registration(describe=describe, ancestors=ancestors)
        logger.debug(f"Registered descriptor table for {cls.__qualname__}")

    def unregister(self, cls: type) -> None:
        self._registry.pop(cls, None)

    def _find_registration(self, obj: Any) -> _Registration | None:
        if not self._registry:
            return None
        for cls in type(obj).__mro__:
            registration = self._registry.get(cls)
            if registration is not None:
                return registration
        return None

    def ensure_inspectable(self, obj: Any) -> None:
        """
        Check that a subject supports member introspection.

        Raises:
            InvalidInputError: For None, UNDEFINED and primitive scalars
        """
        if obj is None or obj is UNDEFINED:
            raise InvalidInputError(obj, "value is absent")
        if isinstance(obj, PRIMITIVE_TYPES) and self._find_registration(obj) is None:
            raise InvalidInputError(obj, "primitive values have no member descriptors")

    def describe_own_members(self, obj: Any) -> MemberTable:
        self.ensure_inspectable(obj)

        registration = self._find_registration(obj)
        if registration is not None:
            return list(registration.describe(obj))

        if isinstance(obj, StructuredObject):
            return obj.own_descriptors()
        if inspect.isclass(obj):
            mutable = _is_mutable_class(obj)
            return [
                (name, describe_attribute(name, attr, writable=mutable, configurable=mutable))
                for name, attr in vars(obj).items()
            ]
        if inspect.ismodule(obj):
            return [(name, describe_attribute(name, attr)) for name, attr in vars(obj).items()]
        if isinstance(obj, Mapping):
            return self._describe_mapping(obj)
        if isinstance(obj, tuple) and hasattr(obj, "_fields"):
            return [
                (name, DataDescriptor(value=value, writable=False, configurable=False))
                for name, value in zip(obj._fields, obj)
            ]
        if isinstance(obj, Sequence):
            return self._describe_sequence(obj)
        return self._describe_instance(obj)

    def ancestor_levels(self, obj: Any) -> list[Any]:
        self.ensure_inspectable(obj)

        registration = self._find_registration(obj)
        if registration is not None:
            if registration.ancestors is None:
                return []
            return list(registration.ancestors(obj))

        if isinstance(obj, StructuredObject):
            return obj.prototype_chain()
        if inspect.isclass(obj):
            return [cls for cls in obj.__mro__[1:] if cls is not object]
        if inspect.ismodule(obj) or isinstance(obj, (Mapping, Sequence)):
            return []
        return [cls for cls in type(obj).__mro__ if cls is not object]

    @staticmethod
    def _describe_mapping(obj: Mapping[Any, Any]) -> MemberTable:
        """
        Describe mapping entries, naming non-string keys as ``[repr(key)]``.

        Raises:
            InvalidInputError: If two keys map to the same member name
        """
        mutable = isinstance(obj, MutableMapping)
        members: MemberTable = []
        keys_by_name: dict[str, Any] = {}
        for key, value in obj.items():
            name = key if isinstance(key, str) else f"[{key!r}]"
            if name in keys_by_name:
                raise InvalidInputError(
                    obj, f"keys {keys_by_name[name]!r} and {key!r} share the member name {name!r}"
                )
            keys_by_name[name] = key
            members.append(
                (name, DataDescriptor(value=value, writable=mutable, configurable=mutable))
            )
        return members

    @staticmethod
    def _describe_sequence(obj: Sequence[Any]) -> MemberTable:
        mutable = isinstance(obj, MutableSequence)
        return [
            (str(index), DataDescriptor(value=value, writable=mutable, configurable=mutable))
            for index, value in enumerate(obj)
        ]

    @staticmethod
    def _describe_instance(obj: Any) -> MemberTable:
        frozen = _is_frozen_instance(obj)
        try:
            namespace = dict(vars(obj))
        except TypeError:
            namespace = {}

        members: MemberTable = [
            (
                name,
                DataDescriptor(
                    value=value,
                    writable=not frozen,
                    enumerable=is_public_name(name),
                    configurable=not frozen,
                ),
            )
            for name, value in namespace.items()
        ]

        seen = set(namespace)
        for cls in type(obj).__mro__:
            for name in _slot_names(cls):
                if name in seen:
                    continue
                try:
                    value = getattr(obj, name)
                except AttributeError:
                    # Unfilled slot; its member descriptor shows up at class level
                    continue
                seen.add(name)
                members.append(
                    (
                        name,
                        DataDescriptor(
                            value=value,
                            writable=not frozen,
                            enumerable=is_public_name(name),
                            configurable=not frozen,
                        ),
                    )
                )
        return members


default_source = ReflectionDescriptorSource()


def describe_own_members(obj: Any) -> MemberTable:
    """Return the own member descriptors of obj using the default source."""
    return default_source.describe_own_members(obj)


def ancestor_levels(obj: Any) -> list[Any]:
    """Return the ancestor levels of obj using the default source."""
    return default_source.ancestor_levels(obj)
