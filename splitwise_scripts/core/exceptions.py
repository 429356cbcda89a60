"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class UsageError(ApplicationError):
    """Raised when a script is invoked without its required flags."""

    def __init__(self, message: str = "Missing required arguments", missing: list[str] | None = None) -> None:
        self.missing = missing or []
        super().__init__(message, code="CLI_USAGE_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error") -> None:
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class HttpStatusError(ExternalServiceError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP error! Status: {status_code}")


class MalformedResponseError(ExternalServiceError):
    """Raised when the API answers with a body that is not valid JSON."""

    def __init__(self, message: str = "Response body is not valid JSON") -> None:
        super().__init__(message)
