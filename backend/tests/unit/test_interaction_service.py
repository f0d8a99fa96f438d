"""Unit tests for the InteractionService (record + recalculate)."""

from datetime import timedelta

import pytest

from leadscore.domain.entities import InteractionType
from leadscore.domain.exceptions import DataAccessError, ValidationError


@pytest.mark.asyncio
async def test_record_interaction_persists_and_recalculates(interaction_service, interactions, scores):
    interaction = await interaction_service.record_interaction(
        "client-1", "demo_request", source="pricing-page", metadata={"campaign": "spring"}
    )

    assert interaction.interaction_type == "demo_request"
    assert interaction.value == 0.0
    assert interactions.items == [interaction]

    assert len(scores.records) == 1
    record = scores.records[0]
    assert record.score == 35
    assert record.score_change == 35
    assert record.factors.engagement == 15


@pytest.mark.asyncio
async def test_each_interaction_appends_a_record(interaction_service, scores, clock):
    await interaction_service.record_interaction("client-1", InteractionType.DEMO_REQUEST)
    clock.advance(minutes=1)
    await interaction_service.record_interaction("client-1", InteractionType.PAYMENT, value=1200)

    assert [r.score for r in scores.records] == [35, 45]
    assert scores.records[-1].score_change == 10


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "client_id, interaction_type, value",
    [
        ("", "email_open", None),
        ("   ", "email_open", None),
        ("client-1", "fax_received", None),
        ("client-1", "payment", -5),
        ("client-1", "payment", float("nan")),
    ],
)
async def test_invalid_interactions_rejected(interaction_service, interactions, scores, client_id, interaction_type, value):
    with pytest.raises(ValidationError):
        await interaction_service.record_interaction(client_id, interaction_type, value=value)
    assert interactions.items == []
    assert scores.records == []


@pytest.mark.asyncio
async def test_store_failure_propagates(interaction_service, scores):
    scores.fail_on_append = True
    with pytest.raises(DataAccessError):
        await interaction_service.record_interaction("client-1", "email_open")
    assert scores.records == []


@pytest.mark.asyncio
async def test_list_interactions_newest_first(interaction_service, interactions, clock):
    interactions.add("client-1", "email_open", clock.now - timedelta(days=3))
    interactions.add("client-1", "download", clock.now - timedelta(days=1))
    interactions.add("client-1", "referral", clock.now - timedelta(days=45))

    listed = await interaction_service.list_interactions("client-1", lookback_days=30)

    assert [i.interaction_type for i in listed] == ["download", "email_open"]


@pytest.mark.asyncio
async def test_list_interactions_rejects_lookback_beyond_limit(interaction_service):
    with pytest.raises(ValidationError):
        await interaction_service.list_interactions("client-1", lookback_days=1_000_000)
