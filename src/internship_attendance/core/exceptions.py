class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AttendanceRejectedError(ValidationError):
    """Raised by the service layer when a mark fails the eligibility rules.

    ``result`` is the :class:`ValidationResult` that caused the rejection.
    """

    def __init__(self, result):
        self.result = result
        super().__init__(result.errors[0] if result.errors else "Cannot mark attendance")


class MalformedInputError(DomainError):
    """Raised when the caller passes structurally invalid input (e.g. a bad date string).

    Distinct from ValidationError: the input could not be evaluated at all.
    """


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
