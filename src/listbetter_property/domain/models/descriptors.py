#!/usr/bin/env python3

"""Property descriptor models.

A descriptor carries the visibility and mutability flags of a member plus
either a direct value (``DataDescriptor``) or accessor functions
(``AccessorDescriptor``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final


class _Undefined:
    """Marker for a member that is present but holds no value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def is_defined(value: Any) -> bool:
    """Return True unless value is the UNDEFINED marker (None is defined)."""
    return value is not UNDEFINED


@dataclass(frozen=True)
class DataDescriptor:
    """Descriptor for a member holding a direct value."""

    value: Any = UNDEFINED
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    @property
    def has_value(self) -> bool:
        return is_defined(self.value)


@dataclass(frozen=True)
class AccessorDescriptor:
    """Descriptor for a member backed by getter and/or setter functions."""

    getter: Callable[..., Any] | None = None
    setter: Callable[..., Any] | None = None
    enumerable: bool = True
    configurable: bool = True

    @property
    def has_getter(self) -> bool:
        return self.getter is not None

    @property
    def has_setter(self) -> bool:
        return self.setter is not None


PropertyDescriptor = DataDescriptor | AccessorDescriptor
