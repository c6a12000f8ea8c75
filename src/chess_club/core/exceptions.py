class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a session, record or student an operation needs is absent."""


class InvariantViolationError(DomainError):
    """Raised when an action would break attendance state rules (e.g. check-out before check-in)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class BackendUnavailableError(DomainError):
    """Raised when the database cannot be reached or a write fails.

    Retryable: the caller decides whether to try again.
    """
