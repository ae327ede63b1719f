"""Contact add, lookup, field updates, and delete."""

from recordbook.application.keyed_service import KeyedRecordService
from recordbook.application.ports import PhoneFormatter, RecordRepository
from recordbook.domain import Contact


class ContactService(KeyedRecordService[Contact]):
    """Keeps contacts by contact_id. Thread safety is up to the repository passed in."""

    record_type = Contact
    id_attribute = "contact_id"
    null_record_message = "Contact cannot be null"
    null_id_message = "Contact ID cannot be null"
    duplicate_message = "Contact ID already exists"
    not_found_message = "Contact not found"

    def __init__(
        self,
        repository: RecordRepository[Contact],
        *,
        phone_formatter: PhoneFormatter | None = None,
        phone_region: str | None = None,
    ) -> None:
        super().__init__(repository)
        self._format_phone = phone_formatter
        self._phone_region = phone_region

    def add_contact(self, contact: Contact) -> Contact:
        return self._add(contact)

    def create_contact(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> Contact:
        """Build a Contact from raw fields and add it. Validation errors surface before the id is checked."""
        return self._add(Contact(contact_id, first_name, last_name, phone, address))

    def get_contact(self, contact_id: str) -> Contact:
        return self._require(contact_id)

    def delete_contact(self, contact_id: str) -> None:
        self._delete(contact_id)

    def update_first_name(self, contact_id: str, first_name: str) -> None:
        self._update(contact_id, "first_name", first_name)

    def update_last_name(self, contact_id: str, last_name: str) -> None:
        self._update(contact_id, "last_name", last_name)

    def update_phone(self, contact_id: str, phone: str) -> None:
        self._update(contact_id, "phone", phone)

    def update_address(self, contact_id: str, address: str) -> None:
        self._update(contact_id, "address", address)

    def contact_count(self) -> int:
        return len(self)

    def international_phone(self, contact_id: str, region: str | None = None) -> str | None:
        """Return the contact's phone in E.164 form, or None if it is not a valid number in region.

        region falls back to the one the service was built with.
        """
        contact = self._require(contact_id)
        region = region or self._phone_region
        if self._format_phone is None or not region:
            raise RuntimeError("ContactService has no phone formatter or region configured")
        return self._format_phone(contact.phone, region)
