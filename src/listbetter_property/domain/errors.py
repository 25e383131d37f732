#!/usr/bin/env python3

"""Domain errors."""

from typing import Any


class InvalidInputError(TypeError):
    """Raised when the inspected subject does not support member introspection."""

    def __init__(self, subject: Any, reason: str | None = None) -> None:
        self.type_name = type(subject).__name__
        message = f"Cannot inspect members of {self.type_name} value {subject!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
