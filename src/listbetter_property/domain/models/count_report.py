#!/usr/bin/env python3

"""Count statistics model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CountReport:
    """Member counts of an inspected object, own members only."""

    total: int = 0
    enumerable: int = 0
    non_enumerable: int = 0
    writable: int = 0
    readonly: int = 0
    with_getters: int = 0
    with_setters: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "enumerable": self.enumerable,
            "nonEnumerable": self.non_enumerable,
            "writable": self.writable,
            "readonly": self.readonly,
            "withGetters": self.with_getters,
            "withSetters": self.with_setters,
        }
