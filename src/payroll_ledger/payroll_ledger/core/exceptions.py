class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class ConsistencyWarning(UserWarning):
    """Stored data disagrees with a domain invariant and was healed on read.

    Logged, never raised.
    """
