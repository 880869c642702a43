class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ExtractionError(ValidationError):
    """Raised when an uploaded document contains no recognized subject."""


class ProfileIncompleteError(DomainError):
    """Raised when a profile is missing or lacks fields required to synchronize."""


class StorageError(DomainError):
    """Raised when the underlying database operation fails."""
