"""Shared add/get/update/delete flow for services that key records by an id string."""

import logging
from typing import ClassVar, Generic, TypeVar

from recordbook.application.ports import RecordRepository

R = TypeVar("R")

logger = logging.getLogger(__name__)


class KeyedRecordService(Generic[R]):
    """
    Enforces id uniqueness on add and existence on get/update/delete.
    Field validation belongs to the record type; this class only moves records in and out.

    Subclasses set the record type, the attribute holding its id, and the
    rejection messages. Messages may use {key} for the requested id.
    """

    record_type: ClassVar[type]
    id_attribute: ClassVar[str]
    null_record_message: ClassVar[str]
    null_id_message: ClassVar[str]
    duplicate_message: ClassVar[str]
    not_found_message: ClassVar[str]

    def __init__(self, repository: RecordRepository[R]) -> None:
        self._repo = repository

    def _add(self, record: R | None) -> R:
        if record is None:
            raise ValueError(self.null_record_message)
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"Expected {self.record_type.__name__}, got {type(record).__name__}"
            )
        key = getattr(record, self.id_attribute)
        if key is None:
            raise ValueError(self.null_id_message)
        if not self._repo.insert(key, record):
            logger.debug("Rejected duplicate %s %r", self.record_type.__name__, key)
            raise ValueError(self.duplicate_message.format(key=key))
        logger.debug("Added %s %r", self.record_type.__name__, key)
        return record

    def _require(self, key: str | None) -> R:
        if key is None:
            raise ValueError(self.null_id_message)
        record = self._repo.get(key)
        if record is None:
            logger.debug("%s %r not found", self.record_type.__name__, key)
            raise ValueError(self.not_found_message.format(key=key))
        return record

    def _delete(self, key: str | None) -> None:
        if key is None:
            raise ValueError(self.null_id_message)
        if not self._repo.remove(key):
            logger.debug("%s %r not found", self.record_type.__name__, key)
            raise ValueError(self.not_found_message.format(key=key))
        logger.debug("Deleted %s %r", self.record_type.__name__, key)

    def _update(self, key: str | None, field: str, value: object) -> None:
        """Assign value to field on the stored record. The record's own check decides validity."""
        record = self._require(key)
        setattr(record, field, value)
        logger.debug("Updated %s %r: %s", self.record_type.__name__, key, field)

    def __len__(self) -> int:
        return self._repo.count()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._repo.contains(key)
