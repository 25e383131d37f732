#!/usr/bin/env python3

"""Property record model produced by the property enumerator."""

from dataclasses import dataclass
from typing import Any

from .descriptors import UNDEFINED, is_defined


@dataclass(frozen=True)
class PropertyRecord:
    """Normalized metadata about one member of an inspected object."""

    name: str
    enumerable: bool
    configurable: bool
    writable: bool | None  # None for accessor-based members
    is_own: bool
    type: str | None = None
    value: Any = UNDEFINED
    has_getter: bool | None = None
    has_setter: bool | None = None

    @property
    def has_value(self) -> bool:
        return is_defined(self.value)

    @property
    def is_readonly(self) -> bool:
        """True only for data members explicitly marked non-writable."""
        return self.writable is False

    def to_dict(self) -> dict[str, Any]:
        """Return a camelCase mapping that omits absent fields."""
        data: dict[str, Any] = {
            "name": self.name,
            "enumerable": self.enumerable,
            "configurable": self.configurable,
        }
        if self.writable is not None:
            data["writable"] = self.writable
        data["isOwn"] = self.is_own
        if self.type is not None:
            data["type"] = self.type
        if self.has_value:
            data["value"] = self.value
        if self.has_getter:
            data["hasGetter"] = True
        if self.has_setter:
            data["hasSetter"] = True
        return data
