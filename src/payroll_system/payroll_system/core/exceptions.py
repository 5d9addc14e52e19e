class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an operation is rejected (bad category, bad field name)."""
