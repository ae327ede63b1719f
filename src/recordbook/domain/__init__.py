"""Domain layer: entities and field checks. No dependencies on outer layers."""

from recordbook.domain.entities import Appointment, Contact, Task

__all__ = ["Appointment", "Contact", "Task"]
