class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule (e.g. roll number)."""


class NotFoundError(DomainError):
    """Raised when an operation targets an identifier that does not exist."""
