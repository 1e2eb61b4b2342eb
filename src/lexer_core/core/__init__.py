"""
Lexer Core Core Module.

Provides foundational types and the exception hierarchy.
"""

__all__ = [
    "CallResult",
    "ConfidentialityLevel",
    "ErrorCode",
    "Operation",
    "ParticipantProfile",
    "ResourceType",
    # Exceptions
    "LexerCoreError",
    "RegistryError",
    "UnauthorizedError",
    "InvalidInputError",
    "StorageError",
    "ChecksumMismatchError",
    "ConfigurationError",
]

from lexer_core.core.exceptions import (
    ChecksumMismatchError,
    ConfigurationError,
    InvalidInputError,
    LexerCoreError,
    RegistryError,
    StorageError,
    UnauthorizedError,
)
from lexer_core.core.models import (
    CallResult,
    ConfidentialityLevel,
    ErrorCode,
    Operation,
    ParticipantProfile,
    ResourceType,
)
