"""
Contact endpoints for API v1.

These routes expose create, read, list, update and delete operations
for contacts.  Request bodies are checked by the validation layer
before the service is called; a ``NotFound`` outcome from the service
is turned into a ``ContactNotFoundError`` which the application's
exception handlers render as HTTP 404.
"""

from typing import List, TypeVar

from fastapi import APIRouter, Depends, Response, status

from contact_book_api.app.api.deps import get_contact_service
from contact_book_api.app.core.errors import ContactNotFoundError
from contact_book_api.app.schemas.contact import ContactRead, ContactRequest
from contact_book_api.app.schemas.error import ErrorResponse
from contact_book_api.app.services.contact_service import ContactService
from contact_book_api.app.services.results import NotFound, Outcome
from contact_book_api.app.services.validation import ensure_valid

T = TypeVar("T")

router = APIRouter()

VALIDATION_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def unwrap(outcome: Outcome[T]) -> T:
    """Return the found value or raise ``ContactNotFoundError``."""
    if isinstance(outcome, NotFound):
        raise ContactNotFoundError(outcome.contact_id, outcome.message)
    return outcome.value


@router.post(
    "/",
    response_model=ContactRead,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
)
def create_contact(
    contact_in: ContactRequest,
    response: Response,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Create a new contact.

    Responds with HTTP 201 and a ``Location`` header pointing at the
    new resource.  Returns HTTP 400 listing every invalid field.
    """
    contact = service.create_contact(ensure_valid(contact_in))
    response.headers["Location"] = f"/api/v1/contacts/{contact.id}"
    return ContactRead.from_contact(contact)


@router.get("/", response_model=List[ContactRead])
def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> List[ContactRead]:
    """Return every stored contact (an empty list when there are none)."""
    return [ContactRead.from_contact(contact) for contact in service.list_contacts()]


@router.get("/{contact_id}", response_model=ContactRead, responses=NOT_FOUND_RESPONSE)
def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Retrieve a single contact by its ID."""
    return ContactRead.from_contact(unwrap(service.get_contact(contact_id)))


@router.put(
    "/{contact_id}",
    response_model=ContactRead,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
)
def update_contact(
    contact_id: int,
    contact_in: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Replace name, email and phone of an existing contact.

    The body is validated before the contact is looked up, so an
    invalid body yields HTTP 400 even for an unknown id.
    """
    data = ensure_valid(contact_in)
    return ContactRead.from_contact(unwrap(service.update_contact(contact_id, data)))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Delete a contact.  Deleting the same id twice yields HTTP 404."""
    unwrap(service.delete_contact(contact_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
