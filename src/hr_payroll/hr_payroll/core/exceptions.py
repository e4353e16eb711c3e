class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request parameters are missing or invalid."""


class NotFoundError(DomainError):
    """Raised when a required record (employee, stats, ...) does not exist."""


class CalculationError(DomainError):
    """Raised when the salary formula is undefined for the given inputs."""
