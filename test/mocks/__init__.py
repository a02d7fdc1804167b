"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_runtime import (
    FixedClock,
    InMemoryLogger,
    ScriptedConfirmation,
    SequentialIdGenerator,
)
from .fake_storage import (
    FailingKeyValueStorage,
    InMemoryKeyValueStorage,
    RecordingPersistence,
)

__all__ = [
    "InMemoryKeyValueStorage",
    "FailingKeyValueStorage",
    "RecordingPersistence",
    "FixedClock",
    "SequentialIdGenerator",
    "InMemoryLogger",
    "ScriptedConfirmation",
]
