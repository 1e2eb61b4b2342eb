"""
Lexer Core Exception Hierarchy.

Defines all custom exceptions used across the registry.
Provides consistent error handling and debugging information.
"""

from typing import Any

from lexer_core.core.models import ErrorCode


class LexerCoreError(Exception):
    """
    Base exception for all Lexer Core errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a LexerCoreError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class RegistryError(LexerCoreError):
    """
    Errors in registry operations.

    Raised when a registry call cannot be applied, including:
    - Unauthorized callers
    - Invalid call arguments
    - Snapshot storage failures

    Subclasses that carry an ``error_code`` are reported to callers as
    tagged failure results rather than propagated.
    """

    error_code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a RegistryError.

        Args:
            message: Human-readable error message
            operation: Registry operation being performed
            key: Map key involved (identity or resource type id)
            details: Optional structured data for debugging
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key

        super().__init__(message, details=details)
        self.operation = operation
        self.key = key


class UnauthorizedError(RegistryError):
    """Raised when a caller lacks the capability for a privileged write."""

    error_code = ErrorCode.UNAUTHORIZED

    def __init__(
        self,
        message: str = "Caller is not authorized",
        *,
        caller: str | None = None,
        operation: str | None = None,
        key: str | None = None,
    ):
        details = {}
        if caller:
            details["caller"] = caller
        super().__init__(message, operation=operation, key=key, details=details)
        self.caller = caller


class InvalidInputError(RegistryError):
    """Raised when a call argument falls outside its accepted domain."""

    def __init__(
        self,
        message: str = "Invalid input",
        *,
        field: str | None = None,
        value: Any = None,
        error_code: ErrorCode | None = None,
        operation: str | None = None,
        key: str | None = None,
    ):
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, operation=operation, key=key, details=details)
        self.field = field
        self.value = value
        self.error_code = error_code


class StorageError(RegistryError):
    """
    Errors reading or writing the registry snapshot.

    These are never converted into call results: a write that cannot be
    persisted is rolled back and the error propagates.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, operation="persist", details=details)
        self.path = path


class ChecksumMismatchError(StorageError):
    """Raised when the snapshot checksum does not match its contents."""

    def __init__(
        self,
        message: str = "Checksum mismatch",
        *,
        path: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ):
        details = {"expected": expected, "actual": actual}
        super().__init__(message, path=path, details=details)
        self.expected = expected
        self.actual = actual


class ConfigurationError(LexerCoreError):
    """
    Errors in configuration loading or validation.

    Raised when:
    - Required environment variables are not set
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        *,
        env_var: str | None = None,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ConfigurationError.

        Args:
            message: Human-readable error message
            env_var: Environment variable name if applicable
            config_key: Configuration key if applicable
            details: Optional structured data for debugging
        """
        details = details or {}
        if env_var:
            details["env_var"] = env_var
        if config_key:
            details["config_key"] = config_key

        super().__init__(message, details=details)
        self.env_var = env_var
        self.config_key = config_key


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, LexerCoreError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
