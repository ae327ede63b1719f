"""Domain entities: Contact, Task, and Appointment."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from recordbook.domain.validation import (
    Check,
    is_future,
    max_length,
    non_blank_max_length,
    ten_digits,
)

CONTACT_ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 10
PHONE_LENGTH = 10
ADDRESS_MAX_LENGTH = 30

TASK_ID_MAX_LENGTH = 10
TASK_NAME_MAX_LENGTH = 20
TASK_DESCRIPTION_MAX_LENGTH = 50

APPOINTMENT_ID_MAX_LENGTH = 10
APPOINTMENT_DESCRIPTION_MAX_LENGTH = 50


class _ValidatedFields:
    """
    Runs the per-field check on every assignment, including the ones made by __init__.
    The identity field may be assigned once.
    """

    _identity: ClassVar[str]
    _identity_label: ClassVar[str]
    _checks: ClassVar[dict[str, Check]]

    def __setattr__(self, name: str, value: object) -> None:
        if name == self._identity and name in self.__dict__:
            raise AttributeError(f"{self._identity_label} is immutable")
        check = self._checks.get(name)
        if check is not None:
            check(value)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._checks:
            raise AttributeError(f"{name} cannot be deleted")
        super().__delattr__(name)


@dataclass
class Contact(_ValidatedFields):
    """
    A person's contact card. contact_id is fixed at construction;
    names, phone, and address can be reassigned and are re-validated each time.
    """

    contact_id: str
    first_name: str
    last_name: str
    phone: str
    address: str

    _identity: ClassVar[str] = "contact_id"
    _identity_label: ClassVar[str] = "Contact ID"
    _checks: ClassVar[dict[str, Check]] = {
        "contact_id": max_length(
            CONTACT_ID_MAX_LENGTH,
            "Contact ID cannot be null and must be 10 characters or less",
        ),
        "first_name": max_length(
            NAME_MAX_LENGTH,
            "First name cannot be null and must be 10 characters or less",
        ),
        "last_name": max_length(
            NAME_MAX_LENGTH,
            "Last name cannot be null and must be 10 characters or less",
        ),
        "phone": ten_digits("Phone number cannot be null and must be exactly 10 digits"),
        "address": max_length(
            ADDRESS_MAX_LENGTH,
            "Address cannot be null and must be 30 characters or less",
        ),
    }


@dataclass
class Task(_ValidatedFields):
    """
    A unit of work. task_id must contain something other than whitespace,
    but is stored exactly as given.
    """

    task_id: str
    task_name: str
    task_description: str

    _identity: ClassVar[str] = "task_id"
    _identity_label: ClassVar[str] = "Task ID"
    _checks: ClassVar[dict[str, Check]] = {
        "task_id": non_blank_max_length(
            TASK_ID_MAX_LENGTH,
            "Task ID cannot be null, empty, or exceed 10 characters",
        ),
        "task_name": max_length(
            TASK_NAME_MAX_LENGTH,
            "Task name cannot be null and must be 20 characters or less",
        ),
        "task_description": max_length(
            TASK_DESCRIPTION_MAX_LENGTH,
            "Task description cannot be null and must be 50 characters or less",
        ),
    }


@dataclass(frozen=True)
class Appointment:
    """
    A scheduled appointment. Immutable once created.
    The date must be in the future when the appointment is built; it is not re-checked later.
    """

    appointment_id: str
    appointment_date: datetime
    description: str

    def __post_init__(self):
        if self.appointment_id is None:
            raise ValueError("Appointment ID cannot be null")
        if not isinstance(self.appointment_id, str):
            raise ValueError("Appointment ID must be a string")
        if not self.appointment_id:
            raise ValueError("Appointment ID cannot be empty")
        if len(self.appointment_id) > APPOINTMENT_ID_MAX_LENGTH:
            raise ValueError("Appointment ID cannot exceed 10 characters")

        if self.appointment_date is None:
            raise ValueError("Appointment date cannot be null")
        if not isinstance(self.appointment_date, datetime):
            raise ValueError("Appointment date must be a datetime")
        if not is_future(self.appointment_date):
            raise ValueError("Appointment date cannot be in the past")

        if self.description is None:
            raise ValueError("Description cannot be null")
        if not isinstance(self.description, str):
            raise ValueError("Description must be a string")
        if len(self.description) > APPOINTMENT_DESCRIPTION_MAX_LENGTH:
            raise ValueError("Description cannot exceed 50 characters")
