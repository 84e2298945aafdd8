"""Domain model for a stored contact."""

from typing import Any, Optional

from pydantic import BaseModel


class Contact(BaseModel):
    """A person's name, email and phone as held by the record store.

    Instances are immutable; use ``model_copy(update=...)`` to derive a
    changed contact.  ``id`` is ``None`` until the store assigns one.
    """

    id: Optional[int] = None
    name: str
    email: str
    phone: str

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by identifier only."""
        if not isinstance(other, Contact):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)
