"""
Outcome types returned by the contact service.

Lookups that can miss return either ``Found`` carrying the value or
``NotFound`` carrying the requested id, so callers have to branch on
the result instead of catching an exception.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    contact_id: int

    @property
    def message(self) -> str:
        return f"Contact with ID {self.contact_id} was not found"


Outcome = Union[Found[T], NotFound]
