from .interaction import InteractionCreate, InteractionResponse
from .lead_score import (
    LeadScoreResponse,
    ScoreDistributionResponse,
    ScoreSnapshotResponse,
    ScoringFactorsSchema,
    ScoringInsightsResponse,
    ScoringRuleResponse,
)

__all__ = [
    "InteractionCreate",
    "InteractionResponse",
    "LeadScoreResponse",
    "ScoreDistributionResponse",
    "ScoreSnapshotResponse",
    "ScoringFactorsSchema",
    "ScoringInsightsResponse",
    "ScoringRuleResponse",
]
