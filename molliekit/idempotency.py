"""Generators of idempotency keys sent with POST requests.

A unique key per operation lets the API recognise a retried request and
avoid performing it twice. Custom generators subclass KeyGenerator.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

TEST_KEY_EXPECTED = "test_ikg_key"


class KeyGenerator(ABC):
    """Produces idempotency keys."""

    @abstractmethod
    def generate(self) -> str:
        """Return a string representation of a unique idempotency key."""


class NopGenerator(KeyGenerator):
    """Always returns the same key; useful for tests and predictable output.

    An empty *expected* falls back to TEST_KEY_EXPECTED.
    """

    def __init__(self, expected: str = "") -> None:
        self.expected = expected or TEST_KEY_EXPECTED

    def __repr__(self) -> str:
        return f"NopGenerator(expected={self.expected!r})"

    def generate(self) -> str:
        return self.expected


class StdGenerator(KeyGenerator):
    """Generates a fresh version 4 UUID for every key."""

    def __repr__(self) -> str:
        return "StdGenerator()"

    def generate(self) -> str:
        return str(uuid.uuid4())