"""Pydantic DTOs (Data Transfer Objects) for lead scores and insights."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from leadscore.domain.entities import LeadTier
from leadscore.domain.scoring_rules import ScoringFactor


class ScoringFactorsSchema(BaseModel):
    engagement: int
    recency: int
    frequency: int
    monetary: int
    behavior: int

    model_config = {"from_attributes": True}


class ScoreSnapshotResponse(BaseModel):
    """A freshly calculated score, persisted or not."""

    client_id: str
    score: int
    factors: ScoringFactorsSchema
    metadata: dict[str, Any]

    model_config = {"from_attributes": True}


class LeadScoreResponse(BaseModel):
    """A stored score record."""

    id: int
    client_id: str
    score: int
    tier: LeadTier
    factors: ScoringFactorsSchema
    previous_score: int | None
    score_change: int
    metadata: dict[str, Any]
    last_updated: datetime

    model_config = {"from_attributes": True}


class ScoreDistributionResponse(BaseModel):
    hot: int
    warm: int
    cold: int
    total: int

    model_config = {"from_attributes": True}


class ScoringInsightsResponse(BaseModel):
    client_id: str
    current_score: int
    score_change: int
    tier: LeadTier
    factors: ScoringFactorsSchema
    recommendations: list[str]
    next_actions: list[str]

    model_config = {"from_attributes": True}


class ScoringRuleResponse(BaseModel):
    """One row of the scoring rule table."""

    factor: ScoringFactor
    condition: str
    points: int
    description: str

    model_config = {"from_attributes": True}
