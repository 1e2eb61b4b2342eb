"""
Core data models for Lexer Core.

Registry records and call results use these type-safe schemas. Records
serialize with hyphenated field names, matching the on-ledger layout.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, Field


class ConfidentialityLevel(IntEnum):
    """Closed set of confidentiality tiers for resource types."""

    PUBLIC = 0
    INTERNAL = 1
    CONFIDENTIAL = 2
    RESTRICTED = 3

    @classmethod
    def bounds(cls) -> tuple[int, int]:
        """Return the (lowest, highest) valid tier."""
        values = [level.value for level in cls]
        return min(values), max(values)


class ErrorCode(IntEnum):
    """Tags carried by rejected write calls."""

    UNAUTHORIZED = 100
    INVALID_CONFIDENTIALITY_LEVEL = 101
    INVALID_RESOURCE_TYPE = 102


class Operation(Enum):
    """Write operations of the registry."""

    UPDATE_PARTICIPANT_PROFILE = "update-participant-profile"
    REGISTER_RESOURCE_TYPE = "register-resource-type"


class ParticipantProfile(BaseModel):
    """Profile record owned by a single caller identity."""

    active: bool = True
    alias: str | None = None
    metadata_url: str | None = Field(default=None, alias="metadata-url")
    registration_timestamp: int = Field(
        default=0,
        ge=0,
        alias="registration-timestamp",
        description="Ledger height at first write",
    )

    model_config = {"populate_by_name": True, "frozen": True, "extra": "forbid"}

    def to_record(self) -> dict[str, Any]:
        """Return the record in its ledger layout."""
        return self.model_dump(by_alias=True, mode="json")


class ResourceType(BaseModel):
    """Resource-type definition. The id is the map key and is not stored here."""

    name: str
    description: str
    confidentiality_level: ConfidentialityLevel = Field(alias="confidentiality-level")

    model_config = {"populate_by_name": True, "frozen": True, "extra": "forbid"}

    def to_record(self) -> dict[str, Any]:
        """Return the record in its ledger layout."""
        return self.model_dump(by_alias=True, mode="json")


@dataclass
class CallResult:
    """Result of a registry write call."""

    status: str  # "success" or "failure"
    operation: str
    caller: str
    key: str
    block_height: int = 0
    error_code: ErrorCode | None = None
    error: str = ""
    audit_ref: str = ""

    def is_ok(self) -> bool:
        """Return True if the call committed."""
        return self.status == "success"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "status": self.status,
            "operation": self.operation,
            "caller": self.caller,
            "key": self.key,
            "block_height": self.block_height,
            "error_code": int(self.error_code) if self.error_code is not None else None,
            "error": self.error,
            "audit_ref": self.audit_ref,
        }
