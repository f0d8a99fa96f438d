"""Pydantic DTOs for recording and listing client interactions."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from leadscore.domain.entities import InteractionType


class InteractionCreate(BaseModel):
    """Schema for recording a new client touchpoint."""

    client_id: str = Field(..., min_length=1, max_length=255, examples=["client-42"])
    interaction_type: InteractionType = Field(..., examples=["demo_request"])
    source: str | None = Field(None, max_length=255, examples=["pricing-page"])
    value: float | None = Field(None, ge=0)
    metadata: dict[str, Any] | None = None


class InteractionResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    client_id: str
    interaction_type: str
    source: str | None
    value: float
    metadata: dict[str, Any] | None
    occurred_at: datetime

    model_config = {"from_attributes": True}
