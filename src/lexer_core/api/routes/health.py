"""
Health endpoint.
"""

from fastapi import APIRouter, Depends

from lexer_core.api.dependencies import get_core
from lexer_core.api.schemas.responses import StatusResponse
from lexer_core.contract import LexerCore

router = APIRouter()


@router.get("", response_model=StatusResponse)
async def health(core: LexerCore = Depends(get_core)) -> StatusResponse:
    """Registry status summary."""
    return StatusResponse(**core.status())
