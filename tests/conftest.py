"""Test configuration and fixtures for the Contact Book API."""

import pytest
from fastapi.testclient import TestClient

from contact_book_api.app.api.deps import get_contact_service
from contact_book_api.app.core.db import init_db
from contact_book_api.app.main import app
from contact_book_api.app.services.contact_service import ContactService
from contact_book_api.app.services.contact_store import InMemoryContactStore
from contact_book_api.app.services.validation import ContactData


@pytest.fixture
def store():
    """Return an empty in-memory record store."""
    return InMemoryContactStore()


@pytest.fixture
def service(store):
    """Return a contact service over the in-memory store."""
    return ContactService(store)


@pytest.fixture
def database_url(tmp_path):
    """Return the path of a freshly migrated SQLite database."""
    path = str(tmp_path / "contacts.db")
    init_db(path)
    return path


@pytest.fixture
def carlos():
    """Return a valid contact payload."""
    return ContactData(name="Carlos Silva", email="carlos@mail.com", phone="(21) 99999-8888")


@pytest.fixture(name="client")
def client_fixture(service):
    """Create a test client whose requests share one in-memory store."""
    app.dependency_overrides[get_contact_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
