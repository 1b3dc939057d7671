"""Custom exception classes for structured error handling.

Client errors (status < 500) are rendered with ``to_dict()``. Everything
else collapses into the generic internal-error envelope built by
``internal_error_body()``.
"""

from typing import Any

INTERNAL_ERROR_MESSAGE = "Internal server error"


class TranslateAPIError(Exception):
    """Base exception for all translate API errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.status_code}


class InvalidParameterError(TranslateAPIError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=400)


class MethodNotAllowedError(TranslateAPIError):
    def __init__(self, message: str = "Method not allowed. Use POST.") -> None:
        super().__init__(message=message, status_code=405)


class InvalidRequestBodyError(TranslateAPIError):
    """Undecodable request body.

    Reported as a 500, not a 400, for compatibility with existing clients.
    """

    def __init__(self, message: str = "Request body is not valid JSON") -> None:
        super().__init__(message=message, status_code=500)


class CopilotAPIError(TranslateAPIError):
    """The completion API failed, returned a bad status, or an unusable payload."""

    def __init__(self, message: str = "Copilot API request failed") -> None:
        super().__init__(message=message, status_code=500)


class TranslationError(TranslateAPIError):
    def __init__(self, message: str = "Translation failed") -> None:
        super().__init__(message=message, status_code=500)


def internal_error_body(exc: BaseException) -> dict[str, Any]:
    """Generic 500 envelope carrying the underlying failure message."""
    return {
        "error": INTERNAL_ERROR_MESSAGE,
        "code": 500,
        "details": str(exc),
    }
