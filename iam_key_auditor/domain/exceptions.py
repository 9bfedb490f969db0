"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class EmptyCredentialSetError(DomainError):
    """Raised when staleness is requested for a user without access keys."""
