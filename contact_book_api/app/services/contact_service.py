"""
Business logic for contacts.

``ContactService`` implements the contact lifecycle on top of a
``ContactStore``:

* create - build a new contact from validated input and let the store
  assign its id;
* get / list - read-only lookups;
* update - fetch the existing contact, replace name, email and phone
  (the id never changes) and save the result;
* delete - check existence first, then remove.

Create and update only accept ``ContactData`` produced by
``services.validation``; anything else raises ``TypeError``.  Lookups that can miss return ``Found`` or
``NotFound`` from ``services.results``; a missing id never causes a
write.  Store errors are not caught here.
"""

import logging
from typing import List

from contact_book_api.app.models.contact import Contact
from contact_book_api.app.services.contact_store import ContactStore
from contact_book_api.app.services.results import Found, NotFound, Outcome
from contact_book_api.app.services.validation import ContactData

logger = logging.getLogger(__name__)


class ContactService:
    """Service class for managing contacts."""

    def __init__(self, store: ContactStore) -> None:
        self.store = store

    def create_contact(self, data: ContactData) -> Contact:
        """Persist a new contact and return it with its assigned id."""
        self._require_validated(data)
        contact = Contact(name=data.name, email=data.email, phone=data.phone)
        saved = self.store.save(contact)
        logger.info("Created contact %s", saved.id)
        return saved

    def get_contact(self, contact_id: int) -> Outcome[Contact]:
        contact = self.store.find_by_id(contact_id)
        if contact is None:
            return self._not_found(contact_id)
        return Found(contact)

    def list_contacts(self) -> List[Contact]:
        return list(self.store.find_all())

    def update_contact(self, contact_id: int, data: ContactData) -> Outcome[Contact]:
        """Overwrite name, email and phone of an existing contact.

        The stored contact is fetched and a copy with the new field
        values is saved, keeping the stored id regardless of input.
        """
        self._require_validated(data)
        existing = self.store.find_by_id(contact_id)
        if existing is None:
            return self._not_found(contact_id)
        changed = existing.model_copy(
            update={"name": data.name, "email": data.email, "phone": data.phone}
        )
        saved = self.store.save(changed)
        logger.info("Updated contact %s", saved.id)
        return Found(saved)

    def delete_contact(self, contact_id: int) -> Outcome[int]:
        if not self.store.exists_by_id(contact_id):
            return self._not_found(contact_id)
        self.store.delete_by_id(contact_id)
        logger.info("Deleted contact %s", contact_id)
        return Found(contact_id)

    @staticmethod
    def _require_validated(data: ContactData) -> None:
        if not isinstance(data, ContactData):
            raise TypeError(
                f"expected ContactData from validation.ensure_valid, got {type(data).__name__}"
            )

    @staticmethod
    def _not_found(contact_id: int) -> NotFound:
        outcome = NotFound(contact_id)
        logger.warning(outcome.message)
        return outcome
