"""
Recordbook core: clean-architecture layout.

- domain: entities (Contact, Task, Appointment). No outer dependencies.
- application: services (ContactService, TaskService, AppointmentService), ports (RecordRepository).
- infrastructure: adapters (InMemoryRepository, LockingRepository) and phone formatting.
- factory: services wired to those adapters and to the environment settings.
"""

from recordbook.application import (
    AppointmentService,
    ContactService,
    KeyedRecordService,
    RecordRepository,
    TaskService,
)
from recordbook.domain import Appointment, Contact, Task
from recordbook.factory import (
    build_appointment_service,
    build_contact_service,
    build_task_service,
)
from recordbook.infrastructure import InMemoryRepository, LockingRepository

__all__ = [
    "Appointment",
    "AppointmentService",
    "Contact",
    "ContactService",
    "InMemoryRepository",
    "KeyedRecordService",
    "LockingRepository",
    "RecordRepository",
    "Task",
    "TaskService",
    "build_appointment_service",
    "build_contact_service",
    "build_task_service",
]
