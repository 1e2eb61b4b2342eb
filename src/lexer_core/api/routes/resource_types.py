"""
Resource type endpoints.
"""

import logging

from fastapi import APIRouter, Depends, status

from lexer_core.api.dependencies import get_core, require_caller
from lexer_core.api.schemas.exceptions import BadRequestError, ForbiddenError
from lexer_core.api.schemas.requests import ResourceTypeRequest
from lexer_core.api.schemas.responses import CallResultResponse
from lexer_core.contract import LexerCore
from lexer_core.core.models import ErrorCode, ResourceType

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=CallResultResponse, status_code=status.HTTP_201_CREATED)
async def register_resource_type(
    request: ResourceTypeRequest,
    caller: str = Depends(require_caller),
    core: LexerCore = Depends(get_core),
) -> CallResultResponse:
    """
    Create or overwrite a resource type.

    Raises:
        ForbiddenError: If the caller is not the administrator
        BadRequestError: If the registry rejects an argument
    """
    result = core.register_resource_type(
        caller,
        request.id,
        request.name,
        request.description,
        request.confidentiality_level,
    )

    if not result.is_ok():
        logger.info(f"Registration of '{request.id}' by {caller} rejected: {result.error}")
        if result.error_code == ErrorCode.UNAUTHORIZED:
            raise ForbiddenError(detail=result.error, code=int(result.error_code))
        raise BadRequestError(
            message=f"Resource type '{request.id}' rejected",
            detail=result.error,
            code=int(result.error_code) if result.error_code is not None else None,
        )

    core.mine_block()
    return CallResultResponse.from_result(result)


@router.get("/{type_id}", response_model=ResourceType | None)
async def get_resource_type_details(
    type_id: str,
    core: LexerCore = Depends(get_core),
) -> ResourceType | None:
    """Return the resource type definition, or null if unregistered."""
    return core.get_resource_type_details(type_id)
