"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol, TypeVar

R = TypeVar("R")


class RecordRepository(Protocol[R]):
    """Holds records keyed by their identifier string."""

    def insert(self, key: str, record: R) -> bool:
        """Store record under key unless the key is taken. Returns False if it was."""
        ...

    def get(self, key: str) -> R | None:
        """Return the record stored under key, or None."""
        ...

    def remove(self, key: str) -> bool:
        """Drop the record under key. Returns True if removed, False if absent."""
        ...

    def contains(self, key: str) -> bool:
        ...

    def count(self) -> int:
        ...


PhoneFormatter = Callable[[str, str], str | None]
"""(national_digits, region) -> E.164 string, or None if the number is not valid in region."""
