"""
Top-level package for the Contact Book API.

Makes ``contact_book_api`` importable so that modules under ``app``
can be referenced with fully qualified names such as
``contact_book_api.app.main``.  All functionality lives in the
``app`` subpackage.
"""

__all__ = []
