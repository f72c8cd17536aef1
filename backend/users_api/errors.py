"""Error types shared across the repository, service and controller layers."""

from typing import Any, List, Optional


class UsersApiError(Exception):
    """Base class for Users API errors."""


class ValidationError(UsersApiError):
    """Request input failed its schema.

    Carried inside a ``ValidationResult``; the controller turns it into a
    400 response and never passes it further down.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(UsersApiError):
    """No row exists for the requested id.

    The service reports this case as a 404 envelope rather than raising.
    """

    def __init__(self, entity: str = "User", entity_id: Optional[int] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class StorageError(UsersApiError):
    """A storage round trip failed (constraint violation, lost connection, ...)."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")
