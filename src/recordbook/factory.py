"""Builds services wired to the in-memory adapters and the environment settings."""

from recordbook.application import AppointmentService, ContactService, TaskService
from recordbook.config import Settings, load_settings
from recordbook.infrastructure import InMemoryRepository, LockingRepository, national_to_e164


def build_contact_service(settings: Settings | None = None) -> ContactService:
    """Contacts live in a plain dict; callers sharing it across threads must lock themselves.

    With no settings given, the phone region comes from load_settings().
    """
    settings = settings or load_settings()
    return ContactService(
        InMemoryRepository(),
        phone_formatter=national_to_e164,
        phone_region=settings.phone_region,
    )


def build_task_service() -> TaskService:
    return TaskService(LockingRepository())


def build_appointment_service() -> AppointmentService:
    return AppointmentService(LockingRepository())
