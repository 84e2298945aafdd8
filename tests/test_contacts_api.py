"""HTTP tests for the contact endpoints."""

import pytest
from fastapi.testclient import TestClient

from contact_book_api.app.api.deps import get_contact_service
from contact_book_api.app.core.config import settings
from contact_book_api.app.main import app
from contact_book_api.app.services.contact_service import ContactService
from contact_book_api.app.services.contact_store import SQLiteContactStore

BASE = "/api/v1/contacts/"
CARLOS = {"name": "Carlos Silva", "email": "carlos@mail.com", "phone": "(21) 99999-8888"}


def create(client, payload=None):
    response = client.post(BASE, json=payload or CARLOS)
    assert response.status_code == 201
    return response.json()


class TestCreate:
    def test_create_returns_contact_with_id(self, client):
        response = client.post(BASE, json=CARLOS)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] >= 1
        assert {k: body[k] for k in CARLOS} == CARLOS
        assert response.headers["location"] == f"/api/v1/contacts/{body['id']}"

    def test_create_ignores_client_supplied_id(self, client):
        body = create(client, {**CARLOS, "id": 500})

        assert body["id"] == 1

    def test_create_reports_every_invalid_field(self, client):
        response = client.post(BASE, json={"name": "Al", "email": "not-an-email", "phone": "123"})

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["error"] == "Validation failed for the submitted fields"
        assert set(body["details"]) == {"name", "email", "phone"}
        assert "timestamp" in body
        assert client.get(BASE).json() == []

    def test_create_with_empty_body_requires_all_fields(self, client):
        response = client.post(BASE, json={})

        assert response.status_code == 400
        assert response.json()["details"] == {
            "name": "Name is required",
            "email": "Email is required",
            "phone": "Phone is required",
        }

    def test_wrong_json_type_uses_validation_shape(self, client):
        response = client.post(BASE, json={**CARLOS, "name": 123})

        assert response.status_code == 400
        assert "name" in response.json()["details"]

    def test_malformed_json_uses_validation_shape(self, client):
        response = client.post(BASE, content="{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert "body" in response.json()["details"]


class TestRead:
    def test_get_existing(self, client):
        created = create(client)

        response = client.get(f"{BASE}{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown(self, client):
        response = client.get(f"{BASE}9999")

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["error"] == "Contact not found"
        assert body["details"] == "Contact with ID 9999 was not found"

    def test_list_empty(self, client):
        response = client.get(BASE)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_all(self, client):
        first = create(client)
        second = create(client, {"name": "Maria Souza", "email": "maria@mail.com", "phone": "(11) 3333-4444"})

        assert client.get(BASE).json() == [first, second]

    def test_non_integer_id_is_rejected(self, client):
        response = client.get(f"{BASE}abc")

        assert response.status_code == 400
        assert "contact_id" in response.json()["details"]


class TestUpdate:
    def test_update_existing(self, client):
        created = create(client)
        changes = {"name": "Carlos Junior", "email": "junior@mail.com", "phone": "(21) 8888-7777"}

        response = client.put(f"{BASE}{created['id']}", json={**changes, "id": 77})

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **changes}
        assert client.get(f"{BASE}{created['id']}").json()["name"] == "Carlos Junior"

    def test_update_unknown_creates_nothing(self, client):
        response = client.put(f"{BASE}9999", json=CARLOS)

        assert response.status_code == 404
        assert "9999" in response.json()["details"]
        assert client.get(BASE).json() == []

    def test_invalid_body_is_reported_before_lookup(self, client):
        response = client.put(f"{BASE}9999", json={**CARLOS, "phone": "123"})

        assert response.status_code == 400
        assert response.json()["details"] == {
            "phone": "Phone must be in the format (XX) XXXXX-XXXX or (XX) XXXX-XXXX"
        }


class TestDelete:
    def test_delete_then_get(self, client):
        created = create(client)

        response = client.delete(f"{BASE}{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE}{created['id']}").status_code == 404

    def test_delete_twice(self, client):
        created = create(client)
        client.delete(f"{BASE}{created['id']}")

        response = client.delete(f"{BASE}{created['id']}")

        assert response.status_code == 404
        assert response.json()["details"] == f"Contact with ID {created['id']} was not found"


class FailingStore:
    """Store whose every operation fails."""

    def _fail(self, *args, **kwargs):
        raise RuntimeError("disk I/O error")

    save = find_by_id = find_all = exists_by_id = delete_by_id = _fail


class TestInternalErrors:
    @pytest.fixture
    def failing_client(self):
        app.dependency_overrides[get_contact_service] = lambda: ContactService(FailingStore())
        yield TestClient(app, raise_server_exceptions=False)
        app.dependency_overrides.clear()

    def test_details_hidden_by_default(self, failing_client, monkeypatch):
        monkeypatch.setattr(settings, "debug", False)

        response = failing_client.get(BASE)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert body["details"] == "An unexpected error occurred"

    def test_details_shown_in_debug(self, failing_client, monkeypatch):
        monkeypatch.setattr(settings, "debug", True)

        response = failing_client.get(f"{BASE}1")

        assert response.status_code == 500
        assert response.json()["details"] == "disk I/O error"


class TestSQLiteBackedApi:
    @pytest.fixture
    def sqlite_client(self, database_url):
        service = ContactService(SQLiteContactStore(database_url))
        app.dependency_overrides[get_contact_service] = lambda: service
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.mark.parametrize("contact_id", [2 ** 63, 2 ** 64])
    def test_id_beyond_integer_range_is_not_found(self, sqlite_client, contact_id):
        url = f"{BASE}{contact_id}"

        get_response = sqlite_client.get(url)
        put_response = sqlite_client.put(url, json=CARLOS)
        delete_response = sqlite_client.delete(url)

        assert get_response.status_code == 404
        assert get_response.json()["details"] == f"Contact with ID {contact_id} was not found"
        assert put_response.status_code == 404
        assert delete_response.status_code == 404
        assert sqlite_client.get(BASE).json() == []

    def test_full_lifecycle(self, database_url):
        service = ContactService(SQLiteContactStore(database_url))
        app.dependency_overrides[get_contact_service] = lambda: service
        try:
            client = TestClient(app)
            created = create(client)
            assert created["id"] == 1

            updated = client.put(
                f"{BASE}1", json={**CARLOS, "email": "carlos.silva@mail.com"}
            ).json()
            assert updated["email"] == "carlos.silva@mail.com"
            assert client.get(BASE).json() == [updated]

            assert client.delete(f"{BASE}1").status_code == 204
            assert client.get(BASE).json() == []
        finally:
            app.dependency_overrides.clear()


def test_cors_preflight_allows_configured_origin(client):
    response = client.options(
        BASE,
        headers={
            "Origin": "http://localhost:4200",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"


def test_openapi_metadata(client):
    info = client.get("/openapi.json").json()["info"]

    assert info["title"] == settings.project_name
    assert info["license"]["name"] == "MIT License"
