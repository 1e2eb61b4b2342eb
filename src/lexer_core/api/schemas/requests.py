"""
Pydantic request schemas for API endpoints.

Field bounds mirror the typed arguments of the registry call surface.
"""

from pydantic import BaseModel, Field, StrictInt


class ProfileUpdateRequest(BaseModel):
    """Body of update-participant-profile. Omitted fields are cleared."""

    alias: str | None = Field(None, max_length=50, examples=["TestUser"])
    metadata_url: str | None = Field(
        None,
        alias="metadata-url",
        max_length=256,
        examples=["https://example.com/profile"],
    )

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ResourceTypeRequest(BaseModel):
    """Body of register-resource-type."""

    id: str = Field(..., description="Resource type identifier", examples=["analytics"])
    name: str = Field(..., examples=["Performance Analytics"])
    description: str = Field(..., examples=["Aggregate performance metrics"])
    confidentiality_level: StrictInt = Field(
        ...,
        alias="confidentiality-level",
        description="Unsigned confidentiality tier",
        examples=[2],
    )

    model_config = {"populate_by_name": True, "extra": "forbid"}
