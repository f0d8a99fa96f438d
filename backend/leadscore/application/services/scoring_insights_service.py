"""Scoring insights: recommendations and next actions from a client's latest score."""

from leadscore.application.interfaces import LeadScoreRepository
from leadscore.domain.entities import LeadTier, ScoringFactors, ScoringInsights
from leadscore.infrastructure.logging.colored_logger import ScoringLogger, ScoringStage

slog = ScoringLogger("LeadScoringService")

# (factor, threshold, recommendation); each factor below its threshold adds one, in this order
_RECOMMENDATION_RULES: tuple[tuple[str, int, str], ...] = (
    ("engagement", 10, "Increase engagement through targeted campaigns."),
    ("recency", 10, "Re-engage with recent content or offers."),
    ("frequency", 10, "Increase interaction frequency with regular touchpoints."),
    ("behavior", 5, "Encourage specific actions like demo requests or downloads."),
)

_NEXT_ACTIONS: dict[LeadTier, tuple[str, ...]] = {
    LeadTier.HOT: (
        "Prioritize for sales outreach",
        "Schedule demo or meeting",
        "Prepare proposal",
    ),
    LeadTier.WARM: (
        "Continue nurturing campaign",
        "Send relevant content",
        "Monitor for engagement signals",
    ),
    LeadTier.COLD: (
        "Re-engage with valuable content",
        "Segment for targeted campaigns",
        "Consider lead qualification",
    ),
}


def generate_recommendations(factors: ScoringFactors) -> list[str]:
    return [
        text
        for factor, threshold, text in _RECOMMENDATION_RULES
        if getattr(factors, factor) < threshold
    ]


def generate_next_actions(score: int) -> list[str]:
    return list(_NEXT_ACTIONS[LeadTier.from_score(score)])


class ScoringInsightsService:
    """Builds insights on demand from the score store."""

    def __init__(self, score_repository: LeadScoreRepository):
        self._scores = score_repository

    async def get_scoring_insights(self, client_id: str) -> ScoringInsights | None:
        """Return insights for the client's latest score, or None if never scored."""
        record = await self._scores.get_latest(client_id)
        if record is None:
            return None

        insights = ScoringInsights(
            client_id=client_id,
            current_score=record.score,
            score_change=record.score_change,
            factors=record.factors,
            tier=record.tier,
            recommendations=generate_recommendations(record.factors),
            next_actions=generate_next_actions(record.score),
        )
        slog.step(
            ScoringStage.INSIGHTS,
            "Insights generated",
            client_id=client_id,
            tier=insights.tier.value,
            recommendations=len(insights.recommendations),
        )
        return insights
