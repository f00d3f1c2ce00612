class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is invalid (bad month, missing field...)."""


class DataError(DomainError):
    """Raised when attendance, date or record data is malformed or out of range."""


class ConfigError(DomainError):
    """Raised when shift or multiplier configuration needed for overtime is missing."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or department does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
