class DomainError(Exception):
    """Base exception for toolkit errors surfaced to API callers."""


class ValidationError(DomainError):
    """Raised when request input is missing or malformed."""
