class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised by the invoking layer when a subject or note id is unknown."""


class PersistenceError(DomainError):
    """Raised when the storage collaborator fails to read or write a snapshot.

    In-memory state committed before the failure stays committed.
    """
