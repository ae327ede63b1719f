"""Infrastructure layer: concrete implementations of application ports."""

from recordbook.infrastructure.memory_repository import InMemoryRepository, LockingRepository
from recordbook.infrastructure.phone import national_to_e164

__all__ = [
    "InMemoryRepository",
    "LockingRepository",
    "national_to_e164",
]
