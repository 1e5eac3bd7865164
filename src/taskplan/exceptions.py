"""Custom exceptions for taskplan."""


class TaskplanError(Exception):
    """Base exception for all taskplan errors."""

    pass


class ValidationError(TaskplanError):
    """Raised when a plan request or configuration fails validation."""

    pass


class ParseError(TaskplanError):
    """Raised when YAML parsing fails."""

    pass


class SchedulingError(TaskplanError):
    """Raised when no available work day exists within the lookahead horizon."""

    pass
