"""
FastAPI dependencies shared by the endpoint modules.

``get_contact_service`` hands each request a ``ContactService`` over
the SQLite store.  Tests replace it through
``app.dependency_overrides``.
"""

from contact_book_api.app.services.contact_service import ContactService
from contact_book_api.app.services.contact_store import SQLiteContactStore

_store = SQLiteContactStore()


def get_contact_service() -> ContactService:
    return ContactService(_store)
