"""
API request/response schemas and error types.
"""

from lexer_core.api.schemas.exceptions import (
    APIException,
    BadRequestError,
    ForbiddenError,
    MissingCallerError,
)
from lexer_core.api.schemas.requests import ProfileUpdateRequest, ResourceTypeRequest
from lexer_core.api.schemas.responses import CallResultResponse, StatusResponse

__all__ = [
    "APIException",
    "BadRequestError",
    "ForbiddenError",
    "MissingCallerError",
    "ProfileUpdateRequest",
    "ResourceTypeRequest",
    "CallResultResponse",
    "StatusResponse",
]
