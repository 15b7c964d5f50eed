from __future__ import annotations

import itertools
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Produces ids that are unique for the lifetime of a store."""

    def __call__(self) -> str:
        raise NotImplementedError


class UUIDGenerator:
    def __call__(self) -> str:
        return uuid.uuid4().hex


class CounterIdGenerator:
    """Monotonic counter ids ("1", "2", ...), deterministic for tests and seeding."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(int(start))

    def __call__(self) -> str:
        return str(next(self._counter))
