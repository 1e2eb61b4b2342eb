"""
Exception classes for API error handling.
"""


class APIException(Exception):
    """
    Base exception for API errors.

    All API exceptions inherit from this class so error responses share
    one envelope.
    """

    status_code: int = 500
    error_type: str = "api_error"
    message: str = "An error occurred"
    detail: str | None = None

    def __init__(
        self,
        message: str | None = None,
        detail: str | None = None,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        self.message = message or self.message
        self.detail = detail
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_content(self) -> dict[str, object]:
        error: dict[str, object] = {
            "type": self.error_type,
            "message": self.message,
            "detail": self.detail,
        }
        if self.code is not None:
            error["code"] = self.code
        return {"error": error}


class MissingCallerError(APIException):
    """Raised when a write arrives without a caller identity."""

    status_code = 401
    error_type = "missing_caller"
    message = "Caller identity header is required"


class ForbiddenError(APIException):
    """Raised when the caller may not perform the write."""

    status_code = 403
    error_type = "unauthorized"
    message = "Caller is not authorized"


class BadRequestError(APIException):
    """Raised when the registry rejects a call argument."""

    status_code = 400
    error_type = "invalid_input"
    message = "Invalid input"
