"""Domain models, independent of the wire and storage formats."""

from .contact import Contact

__all__ = ["Contact"]
