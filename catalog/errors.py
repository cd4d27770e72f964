# catalog/errors.py
"""
Errors raised by the catalog services.

Each carries the HTTP status the route layer answers with, so handlers in
`catalog/main.py` stay a single mapping.
"""

from typing import Optional


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str, info: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.info = info


class ValidationError(CatalogError):
    """A required field is missing, empty or not a string."""

    status_code = 400


class ReferenceNotFoundError(CatalogError):
    """A referenced parent entity does not exist."""

    status_code = 404


class PersistenceError(CatalogError):
    """The store raised, or a write could not be read back."""

    status_code = 500
