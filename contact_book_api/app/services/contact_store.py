"""
Record store for contacts.

``ContactStore`` is the narrow persistence interface the contact
service depends on.  Two implementations are provided:

* ``SQLiteContactStore`` keeps contacts in the ``contacts`` table of
  the application database.  All queries use parameterized statements.
* ``InMemoryContactStore`` keeps them in a dict; ids are handed out
  from a counter starting at 1.  Useful for tests and embedding.

Both assign the id on the first ``save`` of a contact whose ``id`` is
``None`` and return a new ``Contact`` carrying it.  Saving a contact
that already has an id writes its fields under that id.
"""

import itertools
import logging
import sqlite3
from typing import Dict, List, Optional, Protocol

from contact_book_api.app.core.db import get_cursor
from contact_book_api.app.models.contact import Contact

# Range of a SQLite INTEGER; ids outside it can never have been stored.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


class ContactStore(Protocol):
    """Persistence operations required by ``ContactService``."""

    def save(self, contact: Contact) -> Contact:
        ...

    def find_by_id(self, contact_id: int) -> Optional[Contact]:
        ...

    def find_all(self) -> List[Contact]:
        ...

    def exists_by_id(self, contact_id: int) -> bool:
        ...

    def delete_by_id(self, contact_id: int) -> None:
        ...


class SQLiteContactStore:
    """``ContactStore`` backed by the SQLite database from ``core.db``.

    Every call opens its own connection, so one instance can be shared
    between requests.  The schema must already exist (see
    ``core.db.init_db``).
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def save(self, contact: Contact) -> Contact:
        logger = logging.getLogger(__name__)
        with get_cursor(self.database_url) as cursor:
            if contact.id is None:
                cursor.execute(
                    "INSERT INTO contacts (name, email, phone) VALUES (?, ?, ?)",
                    (contact.name, contact.email, contact.phone),
                )
                saved = contact.model_copy(update={"id": cursor.lastrowid})
            else:
                cursor.execute(
                    """
                    INSERT INTO contacts (id, name, email, phone) VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        email = excluded.email,
                        phone = excluded.phone,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (contact.id, contact.name, contact.email, contact.phone),
                )
                saved = contact
        logger.debug("Stored contact row %s", saved.id)
        return saved

    def find_by_id(self, contact_id: int) -> Optional[Contact]:
        if not self._storable(contact_id):
            return None
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT id, name, email, phone FROM contacts WHERE id = ?",
                (contact_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_contact(row)

    def find_all(self) -> List[Contact]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                "SELECT id, name, email, phone FROM contacts ORDER BY id ASC"
            ).fetchall()
        return [self._row_to_contact(row) for row in rows]

    def exists_by_id(self, contact_id: int) -> bool:
        if not self._storable(contact_id):
            return False
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM contacts WHERE id = ?",
                (contact_id,),
            ).fetchone()
        return row is not None

    def delete_by_id(self, contact_id: int) -> None:
        if not self._storable(contact_id):
            return
        with get_cursor(self.database_url) as cursor:
            cursor.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))

    @staticmethod
    def _storable(contact_id: int) -> bool:
        return SQLITE_MIN_INTEGER <= contact_id <= SQLITE_MAX_INTEGER

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> Contact:
        return Contact(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
        )


class InMemoryContactStore:
    """``ContactStore`` holding contacts in process memory."""

    def __init__(self) -> None:
        self._contacts: Dict[int, Contact] = {}
        self._ids = itertools.count(1)

    def save(self, contact: Contact) -> Contact:
        if contact.id is None:
            contact = contact.model_copy(update={"id": next(self._ids)})
        self._contacts[contact.id] = contact
        return contact

    def find_by_id(self, contact_id: int) -> Optional[Contact]:
        return self._contacts.get(contact_id)

    def find_all(self) -> List[Contact]:
        return list(self._contacts.values())

    def exists_by_id(self, contact_id: int) -> bool:
        return contact_id in self._contacts

    def delete_by_id(self, contact_id: int) -> None:
        self._contacts.pop(contact_id, None)
