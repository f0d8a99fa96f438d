from .interaction import Communication, Interaction, InteractionType
from .lead_score import (
    HOT_THRESHOLD,
    MAX_SCORE,
    WARM_THRESHOLD,
    LeadScore,
    LeadTier,
    ScoreDistribution,
    ScoreFilters,
    ScoreSnapshot,
    ScoringFactors,
    ScoringInsights,
    as_utc,
)

__all__ = [
    "Communication",
    "Interaction",
    "InteractionType",
    "HOT_THRESHOLD",
    "MAX_SCORE",
    "WARM_THRESHOLD",
    "LeadScore",
    "LeadTier",
    "ScoreDistribution",
    "ScoreFilters",
    "ScoreSnapshot",
    "ScoringFactors",
    "ScoringInsights",
    "as_utc",
]
