#!/usr/bin/env python3

"""Per-call options for property enumeration."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

# camelCase option names accepted alongside the snake_case field names
_OPTION_ALIASES = {
    "includeInherited": "include_inherited",
    "includeNonEnumerable": "include_non_enumerable",
    "showTypes": "show_types",
    "showValues": "show_values",
}


@dataclass(frozen=True)
class ListOptions:
    """
    Options controlling which members are listed and what is reported.

    ``show_values`` left as None means "not asked": listings still carry
    values, while the text view only prints them when it is True.
    """

    include_inherited: bool = False
    include_non_enumerable: bool = False
    show_types: bool = True
    show_values: Optional[bool] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ListOptions":
        """
        Build options from a mapping, falling back to defaults.

        Args:
            options: Option values keyed by field name or camelCase alias

        Returns:
            ListOptions object

        Raises:
            ValueError: If an unknown option name is given
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown option: {key}")
            values[name] = bool(value)
        return cls(**values)

    def with_overrides(self, **overrides: bool) -> "ListOptions":
        return replace(self, **overrides)
