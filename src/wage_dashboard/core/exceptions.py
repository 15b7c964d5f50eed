class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (negative amount, missing field, bad date)."""


class NotFoundError(DomainError):
    """Raised when a referenced id is absent from the store."""


class LoadFailure(DomainError):
    """Raised when the backing store cannot be read."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
