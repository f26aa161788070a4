class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SettingsStorageError(DomainError):
    """Raised when the deduction policy cannot be persisted."""
