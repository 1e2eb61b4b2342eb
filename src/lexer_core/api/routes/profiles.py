"""
Participant profile endpoints.
"""

from fastapi import APIRouter, Depends

from lexer_core.api.dependencies import get_core, require_caller
from lexer_core.api.schemas.requests import ProfileUpdateRequest
from lexer_core.api.schemas.responses import CallResultResponse
from lexer_core.contract import LexerCore
from lexer_core.core.models import ParticipantProfile

router = APIRouter()


@router.put("", response_model=CallResultResponse)
async def update_participant_profile(
    request: ProfileUpdateRequest,
    caller: str = Depends(require_caller),
    core: LexerCore = Depends(get_core),
) -> CallResultResponse:
    """
    Create or replace the caller's own profile.

    Fields left out of the body are cleared. Always succeeds; the call
    lands in its own block.
    """
    result = core.update_participant_profile(
        caller,
        alias=request.alias,
        metadata_url=request.metadata_url,
    )
    core.mine_block()
    return CallResultResponse.from_result(result)


@router.get("/{identity}", response_model=ParticipantProfile | None)
async def get_participant_profile(
    identity: str,
    core: LexerCore = Depends(get_core),
) -> ParticipantProfile | None:
    """Return the profile for any identity, or null if none exists."""
    return core.get_participant_profile(identity)
