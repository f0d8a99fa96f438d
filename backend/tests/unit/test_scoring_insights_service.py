"""Unit tests for scoring insights (recommendations and next actions)."""

import pytest

from leadscore.application.services.scoring_insights_service import (
    generate_next_actions,
    generate_recommendations,
)
from leadscore.domain.entities import LeadTier, ScoreSnapshot, ScoringFactors

ENGAGEMENT_TIP = "Increase engagement through targeted campaigns."
RECENCY_TIP = "Re-engage with recent content or offers."
FREQUENCY_TIP = "Increase interaction frequency with regular touchpoints."
BEHAVIOR_TIP = "Encourage specific actions like demo requests or downloads."


def test_all_recommendations_for_empty_factors_in_fixed_order():
    assert generate_recommendations(ScoringFactors()) == [
        ENGAGEMENT_TIP,
        RECENCY_TIP,
        FREQUENCY_TIP,
        BEHAVIOR_TIP,
    ]


def test_no_recommendations_at_thresholds():
    factors = ScoringFactors(engagement=10, recency=10, frequency=10, behavior=5)
    assert generate_recommendations(factors) == []


def test_low_engagement_only():
    factors = ScoringFactors(engagement=5, recency=20, frequency=20, behavior=15)
    assert generate_recommendations(factors) == [ENGAGEMENT_TIP]


@pytest.mark.parametrize(
    "score, first_action",
    [
        (100, "Prioritize for sales outreach"),
        (80, "Prioritize for sales outreach"),
        (79, "Continue nurturing campaign"),
        (50, "Continue nurturing campaign"),
        (49, "Re-engage with valuable content"),
        (0, "Re-engage with valuable content"),
    ],
)
def test_next_actions_by_tier(score, first_action):
    actions = generate_next_actions(score)
    assert len(actions) == 3
    assert actions[0] == first_action


@pytest.mark.asyncio
async def test_insights_none_without_score(insights_service):
    assert await insights_service.get_scoring_insights("client-1") is None


@pytest.mark.asyncio
async def test_warm_client_insights(insights_service, scoring_service):
    factors = ScoringFactors(engagement=5, recency=20, frequency=20, monetary=15, behavior=15)
    await scoring_service.save_lead_score(
        ScoreSnapshot(client_id="client-1", score=factors.total, factors=factors)
    )

    insights = await insights_service.get_scoring_insights("client-1")

    assert insights.current_score == 75
    assert insights.tier is LeadTier.WARM
    assert insights.recommendations == [ENGAGEMENT_TIP]


@pytest.mark.asyncio
async def test_score_85_receives_hot_actions(insights_service, scoring_service):
    factors = ScoringFactors(engagement=30, recency=20, frequency=20, monetary=0, behavior=15)
    await scoring_service.save_lead_score(
        ScoreSnapshot(client_id="client-1", score=85, factors=factors)
    )

    insights = await insights_service.get_scoring_insights("client-1")

    assert insights.tier is LeadTier.HOT
    assert insights.score_change == 85
    assert insights.next_actions == [
        "Prioritize for sales outreach",
        "Schedule demo or meeting",
        "Prepare proposal",
    ]
    assert insights.recommendations == []
