"""Error hierarchy for bloglist.

Error layers:
- BloglistError: Base class for all bloglist errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like storage issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class BloglistError(Exception):
    """Base class for all bloglist errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(BloglistError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="NOT_FOUND")


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists or version conflict."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFLICT")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(BloglistError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
