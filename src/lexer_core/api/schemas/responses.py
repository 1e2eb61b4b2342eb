"""
Pydantic response schemas for API endpoints.
"""

from pydantic import BaseModel, Field

from lexer_core.core.models import CallResult


class CallResultResponse(BaseModel):
    """Outcome of a write call."""

    status: str = Field(..., description="Either 'success' or 'failure'")
    operation: str
    caller: str
    key: str
    block_height: int = Field(..., description="Ledger height the call executed at")
    error_code: int | None = None
    error: str = ""
    audit_ref: str = ""

    @classmethod
    def from_result(cls, result: CallResult) -> "CallResultResponse":
        return cls(**result.to_dict())


class StatusResponse(BaseModel):
    """Registry health summary."""

    status: str = "healthy"
    administrator: str
    block_height: int
    profiles: int
    resource_types: int
    persistent: bool
