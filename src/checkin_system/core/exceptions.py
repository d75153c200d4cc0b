class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced student or record does not exist."""


class ConflictError(DomainError):
    """Raised when a write would duplicate an existing roster entry."""


class AuthenticationError(DomainError):
    """Raised when the admin password is wrong."""


class ConfigurationError(Exception):
    """Raised once at startup when settings cannot be turned into a schedule."""


class CheckInRejectedError(ValidationError):
    """A check-in refused by the eligibility rules.

    Carries the structured evaluation so controllers can expose the reason
    category alongside the display message.
    """

    def __init__(self, message: str, evaluation):
        super().__init__(message)
        self.evaluation = evaluation
