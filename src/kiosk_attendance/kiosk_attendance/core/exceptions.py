class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedSession(DomainError):
    """Raised when a session has unusable start/end times or grace period."""
