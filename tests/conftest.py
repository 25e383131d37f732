"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from listbetter_property.domain.models import (
    AccessorDescriptor,
    DataDescriptor,
    StructuredObject,
)
from listbetter_property.infrastructure.config import ENV_PREFIX
from listbetter_property.infrastructure.logging import LoggerSetup


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LISTBETTER_* variables so tests see documented defaults."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo root logger changes made by LoggerSetup."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def person() -> dict:
    return {"firstName": "John", "lastName": "Doe", "age": 30}


@pytest.fixture
def mixed_data() -> dict:
    return {
        "title": "Sample",
        "count": 42,
        "enabled": True,
        "items": [1, 2, 3],
        "metadata": {"version": "1.0"},
    }


@pytest.fixture
def sample_object() -> StructuredObject:
    """
    Object with plain members, one hidden member and one computed accessor.

    Own members in order: name, age, active, tags, config, hidden, computed.
    """
    obj = StructuredObject(
        {
            "name": "Test Object",
            "age": 25,
            "active": True,
            "tags": ["tag1", "tag2"],
            "config": {"debug": False},
        }
    )
    obj.define_property(
        "hidden",
        DataDescriptor(value="secret", writable=True, enumerable=False, configurable=True),
    )
    obj.define_property(
        "computed",
        AccessorDescriptor(
            getter=lambda self: self["age"] * 2,
            setter=lambda self, value: self.__setitem__("age", value / 2),
        ),
    )
    return obj


@pytest.fixture
def prototype_pair() -> tuple[StructuredObject, StructuredObject]:
    """Return (child, base) where child shadows base's 'shared' member."""
    base = StructuredObject({"greet": "hi", "shared": "base"})
    child = StructuredObject({"shared": "child", "own": 1}, prototype=base)
    return child, base
