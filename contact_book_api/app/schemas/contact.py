"""
Pydantic schemas for contact payloads.

``ContactRequest`` is the body accepted by the create and update
endpoints.  Its fields are all optional strings so
that the validation layer can report every missing or malformed field
in one response.  ``ContactRead`` is the representation returned to
clients.
"""

from typing import Optional

from pydantic import BaseModel, Field

from contact_book_api.app.models.contact import Contact


class ContactRequest(BaseModel):
    """Schema for creating or updating a contact."""

    name: Optional[str] = Field(None, examples=["Carlos Silva"])
    email: Optional[str] = Field(None, examples=["carlos@mail.com"])
    phone: Optional[str] = Field(None, examples=["(21) 99999-8888"])


class ContactRead(BaseModel):
    """Schema for reading a contact from the API."""

    id: int
    name: str
    email: str
    phone: str

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactRead":
        return cls.model_validate(contact)
