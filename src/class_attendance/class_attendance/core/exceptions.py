class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownStudentError(ValidationError):
    """Raised when an action targets a student that is not on the roster."""


class UnknownCourseError(ValidationError):
    """Raised when a course id does not exist in the catalog."""
