"""Application layer: services and ports. Depends only on domain."""

from recordbook.application.appointment_service import AppointmentService
from recordbook.application.contact_service import ContactService
from recordbook.application.keyed_service import KeyedRecordService
from recordbook.application.ports import PhoneFormatter, RecordRepository
from recordbook.application.task_service import TaskService

__all__ = [
    "AppointmentService",
    "ContactService",
    "KeyedRecordService",
    "PhoneFormatter",
    "RecordRepository",
    "TaskService",
]
