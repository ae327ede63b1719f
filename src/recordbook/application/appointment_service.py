"""Appointment add, lookup, and delete. Appointments are immutable, so there are no updates."""

from datetime import datetime

from recordbook.application.keyed_service import KeyedRecordService
from recordbook.domain import Appointment


class AppointmentService(KeyedRecordService[Appointment]):
    record_type = Appointment
    id_attribute = "appointment_id"
    null_record_message = "Appointment cannot be null"
    null_id_message = "Appointment ID cannot be null"
    duplicate_message = "Appointment ID already exists: {key}"
    not_found_message = "Appointment ID not found: {key}"

    def add_appointment(self, appointment: Appointment) -> Appointment:
        return self._add(appointment)

    def create_appointment(
        self, appointment_id: str, appointment_date: datetime, description: str
    ) -> Appointment:
        return self._add(Appointment(appointment_id, appointment_date, description))

    def get_appointment(self, appointment_id: str) -> Appointment:
        return self._require(appointment_id)

    def delete_appointment(self, appointment_id: str) -> None:
        self._delete(appointment_id)

    def appointment_count(self) -> int:
        return len(self)
