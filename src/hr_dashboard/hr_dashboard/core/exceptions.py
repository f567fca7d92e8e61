class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when no authenticated identity is available."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotConfiguredError(DomainError):
    """Raised when an employee has no salary structure."""


class NotFoundError(DomainError):
    """Raised when a required employee, payroll record or structure is missing."""


class InvalidStateError(DomainError):
    """Raised on an illegal payroll record transition."""


class DegenerateInputWarning(UserWarning):
    """Issued when the working-day fallback replaces an empty attendance month."""
